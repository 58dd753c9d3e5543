"""Single-slot status reporting shared by every async operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

LOGGER = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    text: str
    severity: Severity = Severity.INFO


StatusListener = Callable[[StatusMessage], None]


class StatusReporter:
    """Holds exactly one current message; every report overwrites it.

    There is no queue and no history. A single listener (usually the status
    bar widget) is told about each new message.
    """

    def __init__(self, listener: Optional[StatusListener] = None) -> None:
        self._current = StatusMessage("")
        self._listener = listener

    @property
    def current(self) -> StatusMessage:
        return self._current

    def set_listener(self, listener: Optional[StatusListener]) -> None:
        self._listener = listener

    def report(self, text: str, severity: Severity = Severity.INFO) -> StatusMessage:
        message = StatusMessage(text, Severity(severity))
        self._current = message
        if message.severity is Severity.ERROR:
            LOGGER.warning("status: %s", text)
        else:
            LOGGER.info("status: %s", text)
        if self._listener is not None:
            self._listener(message)
        return message
