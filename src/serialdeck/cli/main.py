"""SerialDeck CLI - multi-session serial port monitor."""

from __future__ import annotations

import sys

import click

from serialdeck.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Write log records as JSON lines")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Log file path (default: platform log directory)",
)
@click.version_option(package_name="serialdeck")
def cli(debug: bool, json_logs: bool, log_file: str | None) -> None:
    """SerialDeck - monitor several serial ports side by side."""
    from serialdeck.core.connections import ConnectionManager
    from serialdeck.core.dispatcher import Dispatcher
    from serialdeck.core.tabs import TabsController
    from serialdeck.transport.serial_port import SerialTransport
    from serialdeck.ui.app import SerialDeckApp

    path = setup_logging(
        level="DEBUG" if debug else None,
        json_output=json_logs,
        log_file=log_file,
    )

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        logger.error("terminal_unavailable")
        click.echo("serialdeck needs an interactive terminal.", err=True)
        sys.exit(1)

    dispatcher = Dispatcher(TabsController(), ConnectionManager(SerialTransport()))
    app = SerialDeckApp(dispatcher)
    logger.info("app_starting", log_file=str(path))
    try:
        app.run()
    except OSError as exc:
        logger.error("terminal_setup_failed", error=str(exc))
        click.echo(f"Terminal setup failed: {exc}", err=True)
        sys.exit(1)
    finally:
        dispatcher.shutdown()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    cli()
