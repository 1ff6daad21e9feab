"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from blogtools.config import Settings, load_config
from blogtools.core.errors import MoveFilesError, NoteError
from blogtools.core.moves import check_size_arg, find_files, parse_extensions, plan_moves
from blogtools.core.notes import (
    NoteFrontMatter,
    create_note,
    date_to_iso_day,
    open_editor,
    str_date_to_date,
    title_to_file_name,
)
from blogtools.core.pipeline import FileResult, discover_files, run_adapt, run_moves
from blogtools.logger import package_version, setup_logging


logger = logging.getLogger("blogtools.cli")

ConfigOpt = Annotated[Optional[str], typer.Option("--config", "-c", help="Config file")]
NoColorOpt = Annotated[bool, typer.Option("--no-color", help="Do not use colored output")]
VerboseOpt = Annotated[int, typer.Option("--verbose", "-v", count=True, help="Verbose mode (-v, -vv)")]
ProgressOpt = Annotated[bool, typer.Option("--progress-bar", "-p", help="Show progress bar")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(config_file: Optional[str], overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(config_file, overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo(msg: str, color: bool, **kwargs) -> None:
    # color=None lets click decide (tty); False strips ANSI codes
    typer.echo(msg, color=None if color else False, **kwargs)


def _start(name: str, verbose: int, color: bool, silent: bool = False, **args) -> None:
    """Configure logging and announce the command."""
    setup_logging(verbose, color)
    if not silent:
        level = logging.getLevelName(logging.getLogger("blogtools").level)
        _echo(f"{name} version={package_version()}, log level={level}", color, err=True)
    logger.debug("args = %s", args)


def _yellow(path: Path) -> str:
    return typer.style(str(path), fg=typer.colors.YELLOW)


def _report(verb: str, result: FileResult, dry: bool, color: bool) -> None:
    """Print the per-file 'Verb a to b ... done.' line."""
    _echo(f"{verb} {_yellow(result.source)} to {_yellow(result.destination)} ...", color, nl=False)
    if dry:
        _echo(" " + typer.style("simulated.", fg=typer.colors.BLUE), color)
    elif result.ok:
        _echo(" " + typer.style("done", fg=typer.colors.GREEN) + ".", color)
    else:
        _echo(" " + typer.style("failed", fg=typer.colors.RED) + ".", color)


def _report_failure(verb: str, result: FileResult, color: bool) -> None:
    source = typer.style(str(result.source), fg=typer.colors.RED)
    _echo(f"Failed to {verb} {source} because {result.error}", color, err=True)


def _consume(results, total: int, verb: str, fail_verb: str, dry: bool, progress: bool, color: bool) -> int:
    """Drain a batch of FileResults, reporting each one; returns the failure count."""
    failed = 0
    if progress:
        with typer.progressbar(results, length=total, label=verb, color=None if color else False) as bar:
            for result in bar:
                if not result.ok:
                    failed += 1
                    _report_failure(fail_verb, result, color)
        return failed

    for result in results:
        _report(verb, result, dry, color)
        if not result.ok:
            failed += 1
            _report_failure(fail_verb, result, color)
    return failed


def adapt_frontmatter_cmd(
    source: Annotated[str, typer.Option("--source", "-s", help="Source folder")],
    destination: Annotated[str, typer.Option("--destination", "-d", help="Destination folder")],
    extension: Annotated[Optional[str], typer.Option("--extension", "-e", help="File extension to adapt")] = None,
    dry: Annotated[bool, typer.Option("--dry", help="Only show what would be done")] = False,
    no_color: NoColorOpt = False,
    progress_bar: ProgressOpt = False,
    verbose: VerboseOpt = 0,
    config: ConfigOpt = None,
    ):
    """Adapt Pelican frontmatter to Jekyll / Gatsby frontmatter syntax."""
    color = not no_color
    _start("adapt-frontmatter", verbose, color, source=source, destination=destination,
           extension=extension, dry=dry, progress_bar=progress_bar)
    settings = _settings(config, overrides={"frontmatter_extension": extension})

    if dry:
        logger.warning("Running in dry mode. No files will be written.")

    src_dir, dest_dir = Path(source), Path(destination)
    if not src_dir.is_dir():
        _fail(f"Source directory '{source}' does not exist.")
    if not dest_dir.is_dir():
        _fail(f"Destination directory '{destination}' does not exist.")

    paths = discover_files(src_dir, settings.frontmatter_extension)
    logger.debug(
        "Adapting front matter with progress bar = %s and dry mode = %s, source = '%s', "
        "destination = '%s', and #files = %d",
        progress_bar, dry, source, destination, len(paths),
    )

    results = run_adapt(paths, dest_dir, dry)
    failed = _consume(results, len(paths), "Adapting", "adapt", dry, progress_bar, color)
    verb = "Simulated" if dry else "Adapted"
    typer.echo(f"{verb} {len(paths) - failed} file(s), {failed} failed.")


def mv_files_cmd(
    sources: Annotated[list[str], typer.Argument(help="Source directories")],
    destination: Annotated[str, typer.Argument(help="Destination directory")],
    extension: Annotated[Optional[str], typer.Option("--extension", "-e", help="File extensions to consider")] = None,
    size: Annotated[Optional[str], typer.Option("--size", "-s", help="Only consider files bigger than this")] = None,
    dry: Annotated[bool, typer.Option("--dry", "-d", help="Only show what would be done")] = False,
    no_color: NoColorOpt = False,
    progress_bar: ProgressOpt = False,
    verbose: VerboseOpt = 0,
    config: ConfigOpt = None,
    ):
    """Move large files from a nested directory structure into another, flat directory."""
    color = not no_color
    _start("mv-files", verbose, color, sources=sources, destination=destination,
           extension=extension, size=size, dry=dry, progress_bar=progress_bar)
    settings = _settings(config, overrides={"video_extensions": extension, "min_size": size})

    if dry:
        _echo(typer.style("Running in dry mode. No moves will be performed.", fg=typer.colors.BLUE), color)

    try:
        min_size = check_size_arg(settings.min_size)
        extensions = parse_extensions(settings.video_extensions)
    except MoveFilesError as e:
        _fail(str(e))
    if not Path(destination).is_dir():
        _fail(f"Destination directory '{destination}' does not exist.")
    missing = [s for s in sources if not Path(s).is_dir()]
    if missing:
        _fail(f"Source directory '{missing[0]}' does not exist.")

    try:
        files = find_files(sources, min_size, extensions)
        moves = plan_moves(files, destination)
    except MoveFilesError as e:
        _fail(str(e))
    logger.debug("found files = %s", [str(f) for f in files])

    results = run_moves(moves, dry)
    failed = _consume(results, len(moves), "Moving", "move", dry, progress_bar, color)
    verb = "Simulated" if dry else "Moved"
    typer.echo(f"{verb} {len(moves) - failed} file(s), {failed} failed.")


def new_note_cmd(
    title: Annotated[str, typer.Option("--title", "-t", help="Title")],
    date: Annotated[str, typer.Option("--date", "-d", help="Publication date: 'now' or 'YYYY-MM-DD HH:MM'")] = "now",
    edit: Annotated[bool, typer.Option("--edit", "-e", help="Open new note in default editor")] = False,
    config: ConfigOpt = None,
    no_color: NoColorOpt = False,
    silent: Annotated[bool, typer.Option("--silent", "-s", help="Silencium")] = False,
    verbose: VerboseOpt = 0,
    ):
    """Create new blog article or note from markdown template with frontmatter."""
    color = not no_color
    _start("new-note", verbose, color, silent=silent, title=title, date=date, edit=edit)
    settings = _settings(config)
    logger.debug("config = %s", settings)

    notes_dir = Path(settings.notes_directory)
    if not notes_dir.is_dir():
        _fail(f"Notes directory '{settings.notes_directory}' does not exist.")

    try:
        published = str_date_to_date(date)
    except NoteError as e:
        _fail(str(e))

    note_path = notes_dir / date_to_iso_day(published) / title_to_file_name(title)
    if note_path.is_file():
        _fail(f"Cowardly refusing to overwrite existing file {note_path}.")

    frontmatter = NoteFrontMatter(title=title, date=date_to_iso_day(published))
    logger.debug(
        "Creating note '%s' with title = '%s', publication date = '%s', and launching editor = %s",
        note_path, frontmatter.title, frontmatter.date, edit,
    )

    try:
        create_note(note_path, settings.notes_template, frontmatter)
    except NoteError as e:
        _fail("Failed to create note", e)
    if not silent:
        _echo(f"Created {_yellow(note_path)}", color)

    if edit:
        try:
            open_editor(note_path)
        except NoteError as e:
            logger.warning("%s", e)
