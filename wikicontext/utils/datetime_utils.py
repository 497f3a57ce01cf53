from datetime import datetime, timezone
from typing import Optional, Union


def parse_to_utc_naive(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse an ISO datetime string or datetime object and return a UTC-naive datetime.

    Returns None if parsing fails or value is None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(value)
        except ValueError:
            import logging
            logging.debug("Could not parse datetime string: %s", value)
            return None
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso_timestamp(value: datetime) -> str:
    """Format as `YYYY-MM-DDTHH:MM:SS.mmmZ`; naive values are taken as UTC."""
    dt = parse_to_utc_naive(value)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def iso_date(value: datetime) -> str:
    return parse_to_utc_naive(value).strftime("%Y-%m-%d")
