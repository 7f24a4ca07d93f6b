"""cljindent newline command - insert an indented line break at the cursor."""

from pathlib import Path

import click

from cljindent.cli.utils import locate_cursor, read_source
from cljindent.core.errors import CljIndentError
from cljindent.editor.adapter import insert_newline_and_indent


@click.command()
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--pos", type=int, default=None, help="Cursor offset (overrides the marker)")
@click.option("--at-end", is_flag=True, help="Place the cursor at the end of the input")
@click.option("--marker", default=None, help="Cursor marker (default from config)")
@click.pass_context
def newline_command(
    ctx: click.Context,
    path: Path | None,
    pos: int | None,
    at_end: bool,
    marker: str | None,
) -> None:
    """Print the input with an indented line break inserted at the cursor.

    When the cursor came from a marker, the marker is written back at the
    new cursor position.
    """
    config = ctx.obj["config"]
    raw = read_source(path)
    try:
        cursor = locate_cursor(
            raw,
            marker=marker or config.editor.cursor_marker,
            pos=pos,
            at_end=at_end,
        )
        insertion = insert_newline_and_indent(cursor.text, cursor.pos)
    except CljIndentError as e:
        raise click.ClickException(e.message) from e

    result = insertion.text
    if cursor.marker is not None:
        result = result[: insertion.cursor] + cursor.marker + result[insertion.cursor :]
    click.echo(result, nl=False)
