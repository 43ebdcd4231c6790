"""Create the main Typer CLI app."""

import typer

from wlc.cli.check import check


def _create_app() -> typer.Typer:
    """Create and configure the single-command CLI Typer app."""
    app = typer.Typer(
        name="wlc",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check links of a local directory or url with the W3C link checker",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )
    app.command(name="wlc")(check)
    return app
