"""Batch drivers: adapt every matching file in a directory, move a set of files

Both drivers are sequential and keep going after a per-file failure; each
yields one result per file so the CLI can report progress as it happens.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from blogtools.core.errors import AdaptError
from blogtools.core.frontmatter import adapt_file
from blogtools.core.moves import move_file


logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome for one file: error is None on success (or in dry mode)."""
    source: Path
    destination: Path
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def discover_files(source: Path, extension: str) -> list[Path]:
    """Return sorted direct children of source with the given extension (no leading dot)."""
    return sorted(p for p in source.iterdir() if p.is_file() and p.suffix == f".{extension}")


def _run(
    pairs: Iterable[tuple[Path, Path]],
    action: Callable[[Path, Path], None],
    errors: tuple[type[Exception], ...],
    dry: bool,
    ) -> Iterator[FileResult]:
    for src, dest in pairs:
        if dry:
            yield FileResult(src, dest)
            continue
        try:
            action(src, dest)
        except errors as e:
            logger.debug("failed %s -> %s: %s", src, dest, e)
            yield FileResult(src, dest, e)
        else:
            yield FileResult(src, dest)


def run_adapt(paths: Iterable[Path], destination: Path, dry: bool = False) -> Iterator[FileResult]:
    """Adapt each path into destination / path.name."""
    pairs = ((p, destination / p.name) for p in paths)
    return _run(pairs, adapt_file, (AdaptError,), dry)


def run_moves(moves: Iterable[tuple[Path, Path]], dry: bool = False) -> Iterator[FileResult]:
    """Rename each (from, to) pair."""
    return _run(moves, move_file, (OSError,), dry)
