from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from wikicontext.utils.datetime_utils import utc_now


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusEvent:
    message: str
    severity: Severity
    created_at: datetime = field(default_factory=utc_now)
