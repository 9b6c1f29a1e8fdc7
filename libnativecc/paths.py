"""Path helpers for arguments embedded into compiler command lines."""

from __future__ import annotations

from pathlib import PurePath


def relativize_to_base(
    base: PurePath,
    target: PurePath,
    *,
    separator: str = "/",
) -> str:
    """Express `target` as a path relative to `base` directory.

    Works lexically (filesystem is never touched), so both paths should be absolute or normalized the same way.
    Targets outside of `base` are reached by `..` traversal, relative targets are treated as already relative to `base`.

    :param base: Directory that result is relative to (e.g compiler working directory)
    :param target: Path to express
    :param separator: Path separator used to join result, toolchain specific
    :return: Relative path, `.` when both paths are same
    """
    if not target.is_absolute():
        parts = _normalize_parts(target.parts)
        return separator.join(parts) if parts else "."

    base_parts = _normalize_parts(base.parts)
    target_parts = _normalize_parts(target.parts)

    if base_parts[:1] != target_parts[:1]:
        # Different anchors (e.g another drive on Windows), there is no relative form
        return str(target)

    common = 0
    for base_part, target_part in zip(base_parts, target_parts, strict=False):
        if base_part != target_part:
            break
        common += 1

    parts = [".."] * (len(base_parts) - common) + target_parts[common:]
    return separator.join(parts) if parts else "."


def _normalize_parts(parts: tuple[str, ...]) -> list[str]:
    """Collapse `.` and `..` segments without resolving symlinks."""
    normalized: list[str] = []
    for part in parts:
        if part in ("", "."):
            continue
        if part == ".." and normalized and normalized[-1] != "..":
            if len(normalized) == 1 and _is_anchor(normalized[0]):
                # Cannot go above filesystem root
                continue
            normalized.pop()
            continue
        normalized.append(part)
    return normalized


def _is_anchor(part: str) -> bool:
    return part.endswith(("/", "\\"))
