"""Note scaffolding: file naming, publication dates, template rendering, editor launch"""

import logging
import os
import shlex
import subprocess
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, StrictUndefined, TemplateError

from blogtools.core.errors import (
    DateParseError,
    EditorError,
    NoteCreateError,
    NoteWriteError,
    TemplateRenderError,
)


logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M"
DAY_FORMAT = "%Y-%m-%d"
DEFAULT_EDITOR = "vi"


@dataclass
class NoteFrontMatter:
    """Template context for a new note."""
    title: str
    date: str


def title_to_file_name(title: str) -> str:
    """'This is a Song' -> 'this-is-a-song.md'"""
    return title.lower().replace(" ", "-") + ".md"


def str_date_to_date(date: str) -> datetime:
    """Parse 'now' or 'YYYY-MM-DD HH:MM' into a local datetime."""
    if date == "now":
        return datetime.now()
    try:
        return datetime.strptime(date, DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(e) from e


def date_to_iso_day(dt: datetime) -> str:
    return dt.strftime(DAY_FORMAT)


def date_to_iso_time(dt: datetime) -> str:
    return dt.strftime(DATE_FORMAT)


def render_template(template: str, frontmatter: NoteFrontMatter) -> str:
    """Render a Jinja2 template with the frontmatter fields as variables.

    Undefined variables are errors. Output is not HTML-escaped and a
    trailing newline in the template is kept.
    """
    env = Environment(undefined=StrictUndefined, keep_trailing_newline=True, autoescape=False)
    try:
        return env.from_string(template).render(asdict(frontmatter))
    except TemplateError as e:
        raise TemplateRenderError(e) from e


def write_content_to_file(content: str, path: Path) -> None:
    """Write content to path, creating the immediate parent directory if missing."""
    try:
        path.parent.mkdir(exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise NoteWriteError(e) from e


def create_note(path: Path, template: str, frontmatter: NoteFrontMatter) -> None:
    """Render the template and write it to path; an existing file is never overwritten."""
    if path.exists():
        raise NoteCreateError(f"cowardly refusing to overwrite existing file {path}")
    content = render_template(template, frontmatter)
    write_content_to_file(content, path)
    logger.info("created note %s", path)


def open_editor(path: Path) -> None:
    """Open path in $EDITOR (default vi) and wait for it to exit."""
    editor = os.environ.get("EDITOR") or DEFAULT_EDITOR
    command = shlex.split(editor) + [str(path)]
    logger.debug("editor command = %s", command)
    try:
        subprocess.run(command, check=False)
    except OSError as e:
        raise EditorError(e) from e
