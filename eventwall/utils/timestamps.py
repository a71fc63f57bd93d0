from datetime import datetime, timezone


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def today_key() -> str:
    """Analytics bucket key for the current UTC day (YYYY-MM-DD)."""
    return datetime.now(timezone.utc).date().isoformat()
