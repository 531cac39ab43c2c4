from __future__ import annotations

import typer

from .commands import request_cmd, schedules_cmd, settings_cmd, status_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="flightstats",
        help="FlightStats Flex API CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(status_cmd.app, name="status")
    app.add_typer(schedules_cmd.app, name="schedules")
    app.command("request")(request_cmd.request)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
