"""Services: dependency checks, messaging and dispatch."""

from devready.services.channel import InMemoryChannel, JsonLinesChannel, MessageChannel
from devready.services.check import CheckReport, CheckService
from devready.services.dispatcher import Dispatcher, ResultReporter
from devready.services.messages import Command, ResultMessage, ResultTag, decode_command

__all__ = [
    "CheckReport",
    "CheckService",
    "Command",
    "Dispatcher",
    "InMemoryChannel",
    "JsonLinesChannel",
    "MessageChannel",
    "ResultMessage",
    "ResultReporter",
    "ResultTag",
    "decode_command",
]
