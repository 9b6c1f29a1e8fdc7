from pathlib import Path

from libnativecc.options_file.writer import OPTIONS_FILE_PREFIX, OPTIONS_FILE_SUFFIX
from nativecc.cache.vcs import create_cache_gitignore

EXCLUDED_CLEANUP_FILENAMES = {".gitignore"}


def prepare_scratch_directory(path: Path) -> None:
    """Try to create and fill scratch directory with required files."""
    if path.exists():
        return

    path.mkdir(parents=True, exist_ok=False)
    create_cache_gitignore(path)


def cleanup_scratch_directory(path: Path) -> None:
    """Remove options files left in scratch directory.

    (related unless user places any same files in scratch directory).
    """
    for file in path.iterdir():
        if not file.is_file():
            continue
        if not _is_scratch_file_removable(path, file):
            continue
        file.unlink(missing_ok=True)


def _is_scratch_file_removable(scratch_path: Path, path: Path) -> bool:
    """Check is given file is an options file within scratch directory and can be safely removed."""
    return (
        path.absolute().is_relative_to(scratch_path.absolute())  # Must be children
        and path.name.startswith(OPTIONS_FILE_PREFIX)
        and path.suffix == OPTIONS_FILE_SUFFIX
        and path.name not in EXCLUDED_CLEANUP_FILENAMES
    )
