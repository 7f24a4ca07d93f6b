"""cljindent CLI - Clojure smart indentation from the command line."""

import click

from cljindent.cli.column import column_command
from cljindent.cli.newline import newline_command
from cljindent.config.loader import load_config
from cljindent.core.errors import ConfigError
from cljindent.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="cljindent")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cljindent - indentation for new lines in Clojure source."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    ctx.obj["config"] = config


cli.add_command(column_command, name="column")
cli.add_command(newline_command, name="newline")


if __name__ == "__main__":
    cli()
