from datetime import datetime, timezone


def utc_now():
    return datetime.now(timezone.utc)


def isoformat(ts):
    """Serialize a timestamp for JSON; naive values are treated as UTC."""
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.isoformat()
