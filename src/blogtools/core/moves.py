"""Size parsing, extension lists, and file discovery for flattening nested directories"""

import logging
from pathlib import Path
from typing import Iterable

from blogtools.core.errors import (
    EmptyExtensionsError,
    EmptySourcesError,
    InvalidExtensionsError,
    InvalidFileNameError,
    InvalidSizeError,
)


logger = logging.getLogger(__name__)

# suffix -> power of 1024
SCALES = {"k": 1, "M": 2, "G": 3, "T": 4, "P": 5}


def human_size_to_bytes(size: str) -> int:
    """Convert '100', '100k', '2G', ... to bytes (binary multiples, case-sensitive suffix)."""
    if not size:
        raise InvalidSizeError(size)

    scale = SCALES.get(size[-1], 0)
    number = size.rstrip("".join(SCALES)) if scale else size
    if not (number.isascii() and number.isdigit()):
        raise InvalidSizeError(number)
    return int(number) * 1024 ** scale


def check_size_arg(size: str) -> int:
    """Validate a --size argument; returns the threshold in bytes."""
    return human_size_to_bytes(size)


def parse_extensions(text: str) -> list[str]:
    """Split 'avi,mkv,' into ['avi', 'mkv']; a trailing comma is ignored."""
    if not text:
        raise InvalidExtensionsError(text)
    return text.rstrip(",").split(",")


def destination_path(destination_dir: Path | str, file_path: Path | str) -> Path:
    """Return destination_dir / <file name of file_path>."""
    name = Path(file_path).name
    if not name:
        raise InvalidFileNameError(str(file_path))
    return Path(destination_dir) / name


def find_files(sources: Iterable[Path | str], min_size: int, extensions: list[str]) -> list[Path]:
    """Recursively collect files bigger than min_size bytes with one of the given extensions."""
    sources = [Path(s) for s in sources]
    if not sources:
        raise EmptySourcesError()
    if not extensions:
        raise EmptyExtensionsError()

    wanted = set(extensions)
    files = []
    for root in sources:
        found = sorted(
            p for p in root.rglob("*")
            if p.is_file() and p.suffix[1:] in wanted and p.stat().st_size > min_size
        )
        logger.debug("found %d file(s) under %s", len(found), root)
        files.extend(found)
    return files


def plan_moves(files: Iterable[Path], destination: Path | str) -> list[tuple[Path, Path]]:
    """Pair every file with its flat destination path."""
    return [(f, destination_path(destination, f)) for f in files]


def move_file(src: Path, dest: Path) -> None:
    """Rename src to dest; OSError propagates to the caller."""
    src.rename(dest)
