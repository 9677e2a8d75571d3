"""Command line entry point for lsh."""

import sys
from typing import Optional, Tuple

import typer
from loguru import logger

from lsh.config import EXIT_FAILURE, LOG_LEVEL, SEND_TIMEOUT
from lsh.remote import RemoteError, connect_stdio
from lsh.shell import shell_loop

app = typer.Typer(
    name="lsh",
    help="A minimal interactive shell: builtins cd, help and exit, everything else is run as a program.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _setup_logging(level: str) -> None:
    logger.remove()
    try:
        logger.add(
            sys.stderr,
            level=level.upper(),
            format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e
    logger.enable("lsh")


@app.command()
def main(
    connect: Tuple[str, int] = typer.Option(
        (None, None), "--connect", "-c", metavar="IP PORT", help="Connects to an ipv4 server"
    ),
    send_timeout: Optional[int] = typer.Option(
        None, "--send-timeout", "-st", min=0, help=f"Set tcp send timeout (in seconds, default {SEND_TIMEOUT})"
    ),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Diagnostics level (env LSH_LOG_LEVEL)"),
) -> None:
    """Run the interactive command loop."""
    _setup_logging(log_level)

    if send_timeout is not None:
        typer.echo(f"Set send timeout to {send_timeout}")
    else:
        send_timeout = SEND_TIMEOUT

    ip, port = connect
    if ip is not None:
        try:
            connect_stdio(ip, port, send_timeout)
        except RemoteError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(EXIT_FAILURE)

    shell_loop()
