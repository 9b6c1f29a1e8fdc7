from hashlib import sha1
from pathlib import Path

# Enough to not collide for same-named sources within one build
SOURCE_HASH_LENGTH = 16


def object_file_for_source(
    source_file: Path,
    object_directory: Path,
    object_suffix: str,
) -> Path:
    """Get object file path for given source, unique within object directory.

    Sources with same name from different directories (e.g `a/main.c` and `b/main.c`)
    are placed into different subdirectories named by hash of an source path.
    """
    source_path = source_file.absolute().as_posix()
    digest = sha1(source_path.encode(), usedforsecurity=False).hexdigest()
    return (
        object_directory
        / digest[:SOURCE_HASH_LENGTH]
        / source_file.with_suffix(object_suffix).name
    )
