"""cljindent column command - print the indentation for a new line."""

import json
from pathlib import Path

import click

from cljindent.cli.utils import locate_cursor, read_source
from cljindent.core.errors import CljIndentError
from cljindent.editor.adapter import StringDocument, clojure_smart_indent


@click.command()
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--pos", type=int, default=None, help="Cursor offset (overrides the marker)")
@click.option("--at-end", is_flag=True, help="Place the cursor at the end of the input")
@click.option("--marker", default=None, help="Cursor marker (default from config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def column_command(
    ctx: click.Context,
    path: Path | None,
    pos: int | None,
    at_end: bool,
    marker: str | None,
    as_json: bool,
) -> None:
    """Print the indentation column for a line break at the cursor.

    PATH is a Clojure file (default: stdin). The cursor is the first cursor
    marker in the input unless --pos or --at-end is given.
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
        column = clojure_smart_indent(StringDocument(cursor.text), cursor.pos)
    except CljIndentError as e:
        raise click.ClickException(e.message) from e

    if as_json:
        click.echo(json.dumps({"column": column, "offset": cursor.pos}))
    else:
        click.echo(column)
