"""Pelican frontmatter adapter: parse -> normalize -> render, plus stream and file wrappers

Pelican's frontmatter is not YAML but a sequence of `key: value` lines ending
at the first blank line. Every line of that block is read as a key/value pair;
the semantics of `tags`, `category`, and `slug` are hardcoded.
"""

import io
import logging
from pathlib import Path
from typing import Iterable, TextIO

from blogtools.core.errors import (
    DestinationOpenError,
    ReadError,
    SourceOpenError,
    WriteError,
)
from blogtools.core.models import (
    FieldValue,
    ListField,
    NormalizedFrontMatter,
    RawFrontMatter,
    Scalar,
)


logger = logging.getLogger(__name__)

DELIMITER = "---\n"


def parse_front_matter(lines: Iterable[str]) -> RawFrontMatter:
    """Split each line once on ':' into a raw field; lines without a colon get an empty value."""
    fields: RawFrontMatter = {}
    for line in lines:
        parts = line.split(":", 1)
        if len(parts) == 1:
            fields[parts[0]] = ""
        else:
            fields[parts[0]] = parts[1].strip()
    return fields


def _split_list(value: str) -> ListField:
    return ListField(s.strip() for s in value.split(","))


def normalize(raw: RawFrontMatter) -> NormalizedFrontMatter:
    """Lower-case keys, turn tags/category into lists, rename category, drop slug."""
    fields: dict[str, FieldValue] = {}
    for key, value in raw.items():
        key = key.lower()
        if key == "tags":
            fields["tags"] = _split_list(value)
        elif key == "category":
            fields["categories"] = _split_list(value)
        elif key == "slug":
            continue
        else:
            fields[key] = Scalar(value)
    return NormalizedFrontMatter(fields)


def _render_field(key: str, value: FieldValue) -> str:
    if isinstance(value, ListField):
        items = "".join(f'- "{item}"\n' for item in value.items)
        return f"{key}:\n{items}"
    # embedded quotes are written as-is
    return f'{key}: "{value.value}"\n'


def render(frontmatter: NormalizedFrontMatter) -> str:
    """Render YAML frontmatter between '---' lines with keys in ascending order."""
    parts = [DELIMITER]
    for key in sorted(frontmatter):
        parts.append(_render_field(key, frontmatter[key]))
    parts.append(DELIMITER)
    return "".join(parts)


def _write(dest: TextIO, text: str) -> None:
    try:
        dest.write(text)
    except (OSError, ValueError) as e:
        raise WriteError(e) from e


def adapt(src: TextIO, dest: TextIO) -> None:
    """Read a Pelican document from src and write the Jekyll-style document to dest.

    The first exactly-empty line ends the frontmatter block and is dropped.
    Every body line is written as '\\n' + line, so the body starts with one
    blank line after the closing delimiter. Output already written is not
    rolled back when a later write fails.
    """
    try:
        text = src.read()
    except (OSError, ValueError) as e:
        raise ReadError(e) from e

    lines = iter(text.split("\n"))
    block = []
    for line in lines:
        if not line:
            break
        block.append(line)

    raw = parse_front_matter(block)
    frontmatter = normalize(raw)
    logger.debug("frontmatter fields = %s", sorted(frontmatter))

    _write(dest, render(frontmatter))
    for line in lines:
        _write(dest, "\n")
        _write(dest, line)


def adapt_text(text: str) -> str:
    """Run adapt() against in-memory streams."""
    out = io.StringIO()
    adapt(io.StringIO(text), out)
    return out.getvalue()


def adapt_file(src: Path, dest: Path) -> None:
    """Adapt src into dest; line endings are passed through untouched.

    src is read completely before dest is opened, so src and dest may be the same file.
    """
    try:
        reader = open(src, encoding="utf-8", newline="")
    except OSError as e:
        raise SourceOpenError(e) from e

    with reader:
        try:
            text = reader.read()
        except (OSError, ValueError) as e:
            raise ReadError(e) from e

    try:
        writer = open(dest, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise DestinationOpenError(e) from e
    with writer:
        adapt(io.StringIO(text, newline=""), writer)
