"""Status notifications emitted while collecting context."""
import logging
import threading
from collections import deque
from typing import Deque, List, Optional, Protocol

from wikicontext.domain.status import Severity, StatusEvent

logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class StatusSink(Protocol):
    def notify(self, message: str, severity: Severity = Severity.INFO) -> None: ...


class LoggingStatusSink:
    """Forward status messages to the standard logging tree."""

    def __init__(self, target: Optional[logging.Logger] = None):
        self._logger = target or logger

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        severity = Severity(severity)
        self._logger.log(_LEVELS[severity], "[%s] %s", severity.value, message)


class RecordingStatusSink:
    """Keep the most recent status events in memory.

    Used by the API to return what happened during a run. Events are also
    forwarded to `forward` (logging by default).
    """

    def __init__(self, max_events: int = 200, forward: Optional[StatusSink] = None):
        self._lock = threading.Lock()
        self._events: Deque[StatusEvent] = deque(maxlen=max(1, int(max_events)))
        self._forward = forward if forward is not None else LoggingStatusSink()

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        event = StatusEvent(message=message, severity=Severity(severity))
        with self._lock:
            self._events.append(event)
        self._forward.notify(message, event.severity)

    def events(self) -> List[StatusEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
