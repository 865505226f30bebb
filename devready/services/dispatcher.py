"""Message dispatcher and result reporter.

The dispatcher subscribes to a channel, turns each recognized inbound
command into a dependency check, and hands the result to the reporter,
which posts exactly one outbound message per finished check.

Lifecycle: setup() subscribes, dispose() releases the subscription once.
Checks already running when dispose() is called keep running and may still
report (unless cancel_on_dispose is set). Unknown commands are ignored.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from types import TracebackType

from devready.services.channel import MessageChannel, Subscription
from devready.services.checkers import CheckResult, Dependency, DependencyChecker
from devready.services.messages import ResultMessage, decode_command

logger = logging.getLogger(__name__)

__all__ = ["ResultReporter", "Dispatcher"]


class ResultReporter:
    """Post check results on a channel, one message per call."""

    def __init__(self, channel: MessageChannel) -> None:
        self._channel = channel

    def report(self, dependency: Dependency, result: CheckResult) -> ResultMessage:
        message = ResultMessage.for_result(dependency, result)
        self._channel.post_message(message.to_dict())
        return message


class Dispatcher:
    """Route inbound check commands to the dependency checker."""

    def __init__(
        self,
        channel: MessageChannel,
        checker: DependencyChecker,
        reporter: ResultReporter | None = None,
        *,
        cancel_on_dispose: bool = False,
    ) -> None:
        self._channel = channel
        self._checker = checker
        self._reporter = reporter or ResultReporter(channel)
        self._cancel_on_dispose = cancel_on_dispose
        self._subscription: Subscription | None = None
        self._disposed = False
        self._tasks: set[asyncio.Task[None]] = set()
        self._report_failures = 0

    @property
    def active(self) -> bool:
        """True while subscribed and accepting commands."""
        return self._subscription is not None and not self._disposed

    @property
    def pending(self) -> int:
        """Number of checks still in flight."""
        return len(self._tasks)

    @property
    def report_failures(self) -> int:
        """Number of finished checks whose result could not be posted."""
        return self._report_failures

    def setup(self) -> None:
        """Subscribe to the channel. Calling it again is a no-op."""
        if self._disposed:
            raise RuntimeError("Dispatcher has been disposed")
        if self._subscription is not None:
            return
        logger.debug("Setup dependency checker listeners.")
        self._subscription = self._channel.subscribe(self._on_message)

    def dispose(self) -> None:
        """Release the subscription. In-flight checks are left running."""
        if self._disposed:
            return
        self._disposed = True
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        if self._cancel_on_dispose:
            for task in list(self._tasks):
                task.cancel()

    def __enter__(self) -> Dispatcher:
        self.setup()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def _on_message(self, message: Mapping[str, object]) -> None:
        if self._disposed:
            return
        command = decode_command(message)
        if command is None:
            logger.debug("Ignoring unknown message: %r", message.get("command"))
            return
        logger.debug("Received %s command.", command)
        self.dispatch(command.dependency)

    def dispatch(self, dependency: Dependency) -> asyncio.Task[None]:
        """Start the check for a dependency on the running loop."""
        task = asyncio.get_running_loop().create_task(self._run(dependency))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, dependency: Dependency) -> None:
        result = await self._checker.check(dependency)
        try:
            self._reporter.report(dependency, result)
        except Exception:  # noqa: BLE001
            self._report_failures += 1
            logger.exception("Could not post %s result", dependency)

    async def drain(self) -> None:
        """Wait for every in-flight check to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
