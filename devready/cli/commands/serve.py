from __future__ import annotations

import asyncio
import logging
import sys

import typer

from devready.cli.context import build_context
from devready.core.errors import ErrorCode
from devready.services.channel import JsonLinesChannel
from devready.services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def serve(
    cancel_on_exit: bool = typer.Option(
        False,
        "--cancel-on-exit",
        help="Cancel checks still running when input closes",
    ),
) -> None:
    """Answer check commands read as JSON lines on stdin.

    Each line is an object such as {"command": "checkNodejsInstalled"}; every
    result is written to stdout as one JSON line.
    """
    ctx = build_context()
    channel = JsonLinesChannel(sys.stdin, sys.stdout)
    dispatcher = Dispatcher(channel, ctx.checker(), cancel_on_dispose=cancel_on_exit)
    asyncio.run(_serve(channel, dispatcher))

    if dispatcher.report_failures:
        typer.echo(f"error: {dispatcher.report_failures} result(s) could not be written", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))


async def _serve(channel: JsonLinesChannel, dispatcher: Dispatcher) -> None:
    with dispatcher:
        await channel.serve()
        logger.debug("Input closed, %d check(s) in flight", dispatcher.pending)
    # Checks still in flight after disposal report when they finish.
    await dispatcher.drain()
