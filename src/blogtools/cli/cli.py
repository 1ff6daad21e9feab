"""CLI entrypoint: Typer app definition and command registration"""

import typer

from blogtools.cli.commands import adapt_frontmatter_cmd, mv_files_cmd, new_note_cmd


app = typer.Typer(name="blogtools", no_args_is_help=True, help="Blog and file housekeeping utilities")

app.command(name="adapt-frontmatter")(adapt_frontmatter_cmd)
app.command(name="mv-files")(mv_files_cmd)
app.command(name="new-note")(new_note_cmd)
