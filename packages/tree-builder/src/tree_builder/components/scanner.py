import logging
import os
from pathlib import Path

from tree_builder.errors import MalformedEntryError

from .node import ImageFormat, Tree

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset(fmt.value for fmt in ImageFormat)


def image_stem(path: Path, strict: bool = False) -> Path | None:
    """
    Return *path* without its extension when it names a recognised image.

    Args:
        path: Path of a regular file.
        strict: Raise instead of skipping when the file has no extension.

    Returns:
        The extension-stripped path, or None when the file is not an image.
    """
    suffix = path.suffix
    if not suffix:
        if strict:
            raise MalformedEntryError(path, "file has no extension")
        logger.debug("skipping file without extension: %s", path)
        return None
    if suffix[1:] not in IMAGE_EXTENSIONS:
        return None
    return path.with_suffix("")


def _require_utf8(path: Path) -> None:
    try:
        str(path).encode("utf-8")
    except UnicodeEncodeError:
        raise MalformedEntryError(path, "name is not valid UTF-8") from None


def scan_directory(root: str | os.PathLike, strict: bool = False) -> Tree:
    """
    Recursively scan a directory and return it as a Tree.

    Entries are visited in the order the operating system lists them. Symbolic
    links are never followed, so they end up neither in ``children`` nor in
    ``items``.

    Args:
        root: Absolute or relative path to the root directory to scan.
        strict: Treat files without an extension as an error.

    Returns:
        The Tree node for *root*.

    Raises:
        OSError: If *root* or any directory below it cannot be listed.
        MalformedEntryError: If a kept directory or image path is not valid
            UTF-8.
    """
    location = Path(root)
    items: list[Path] = []
    children: list[Tree] = []

    with os.scandir(location) as entries:
        for entry in entries:
            path = location / entry.name
            if entry.is_dir(follow_symlinks=False):
                _require_utf8(path)
                children.append(scan_directory(path, strict))
            elif entry.is_file(follow_symlinks=False):
                stem = image_stem(path, strict)
                if stem is not None:
                    _require_utf8(path)
                    items.append(stem)

    logger.debug(
        "scanned %s: %d images, %d subdirectories", location, len(items), len(children)
    )
    return Tree(location=location, items=items, children=children)
