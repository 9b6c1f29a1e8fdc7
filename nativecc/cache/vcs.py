from pathlib import Path


def create_cache_gitignore(path: Path) -> None:
    """Create .gitignore file for Git VCS to not include scratch directory into VCS."""
    with (path / ".gitignore").open("w") as f:
        f.write("# Internally created by nativecc\n")
        f.write("# Do not include options files and objects into git VCS\n")
        f.write("*\n")
