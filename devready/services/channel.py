"""Message channels between the checker and a UI surface.

A channel delivers inbound messages to subscribed listeners and posts
outbound messages back. Two implementations:
- InMemoryChannel: in-process, records posted messages (embedding, tests)
- JsonLinesChannel: newline-delimited JSON over text streams (stdin/stdout)
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Mapping
from typing import Protocol, TextIO

from devready.core.structured import as_str_dict

logger = logging.getLogger(__name__)

__all__ = [
    "Listener",
    "Subscription",
    "MessageChannel",
    "InMemoryChannel",
    "JsonLinesChannel",
]

type Listener = Callable[[Mapping[str, object]], None]


class Subscription:
    """Handle returned by subscribe(); dispose() removes the listener once."""

    def __init__(self, on_dispose: Callable[[], None]) -> None:
        self._on_dispose: Callable[[], None] | None = on_dispose

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        if self._on_dispose is None:
            return
        on_dispose, self._on_dispose = self._on_dispose, None
        on_dispose()


class MessageChannel(Protocol):
    """Protocol for a bidirectional message channel."""

    def subscribe(self, listener: Listener) -> Subscription:
        """Register a listener for inbound messages."""
        ...

    def post_message(self, message: Mapping[str, object]) -> None:
        """Send a message to the other side."""
        ...


class _ListenerSet:
    """Listener bookkeeping shared by the channel implementations."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._listeners.remove(listener))

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def deliver(self, message: Mapping[str, object]) -> None:
        for listener in list(self._listeners):
            listener(message)


class InMemoryChannel:
    """Channel that keeps everything in process.

    Inbound messages are pushed with deliver(); posted messages are
    recorded in `posted`.
    """

    def __init__(self) -> None:
        self.posted: list[dict[str, object]] = []
        self._listeners = _ListenerSet()

    def subscribe(self, listener: Listener) -> Subscription:
        return self._listeners.subscribe(listener)

    def post_message(self, message: Mapping[str, object]) -> None:
        self.posted.append(dict(message))

    def deliver(self, message: Mapping[str, object]) -> None:
        self._listeners.deliver(message)

    @property
    def listener_count(self) -> int:
        return self._listeners.listener_count

    def commands(self) -> list[str]:
        """Command tags of the posted messages, in posting order."""
        return [str(m.get("command")) for m in self.posted]


class JsonLinesChannel:
    """Channel speaking one JSON object per line.

    Lines that are not JSON objects are logged and skipped.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self._reader = reader
        self._writer = writer
        self._listeners = _ListenerSet()

    def subscribe(self, listener: Listener) -> Subscription:
        return self._listeners.subscribe(listener)

    def post_message(self, message: Mapping[str, object]) -> None:
        self._writer.write(json.dumps(message, separators=(",", ":")) + "\n")
        self._writer.flush()

    def feed_line(self, line: str) -> None:
        """Decode one inbound line and hand it to listeners."""
        text = line.strip()
        if not text:
            return
        try:
            data: object = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring malformed message: %s", e)
            return
        message = as_str_dict(data)
        if message is None:
            logger.warning("Ignoring message that is not a JSON object")
            return
        self._listeners.deliver(message)

    async def serve(self) -> None:
        """Read lines until EOF, delivering each message."""
        while True:
            line = await asyncio.to_thread(self._reader.readline)
            if not line:
                return
            self.feed_line(line)
