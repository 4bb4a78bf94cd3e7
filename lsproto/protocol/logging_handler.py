import logging
from typing import List

from .window import LogMessageParams, MessageType


def message_type(levelno: int) -> MessageType:
    if levelno >= logging.ERROR:
        return MessageType.ERROR
    elif levelno >= logging.WARNING:
        return MessageType.WARNING
    elif levelno >= logging.INFO:
        return MessageType.INFO
    return MessageType.LOG


class LspLoggingHandler(logging.Handler):
    """
    Collects log records as `window/logMessage` params in a buffer owned by
    the caller. Records below the handler's `MessageType` filter are dropped.
    """

    def __init__(
        self,
        buffer: List[LogMessageParams],
        message_filter: MessageType = MessageType.LOG,
    ):
        super().__init__()
        self.buffer = buffer
        self.message_filter = message_filter

    def emit(self, record: logging.LogRecord) -> None:
        kind = message_type(record.levelno)
        if not self.message_filter.enabled(kind):
            return
        log = f"{record.name}: {record.getMessage()}"
        self.buffer.append(LogMessageParams(type=kind, message=log))
