from __future__ import annotations

from datetime import datetime, timezone


def format_timestamp(value: datetime | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def mask_token(token: str | None) -> str:
    if not token:
        return "(empty)"
    if len(token) <= 12:
        return "(set)"
    return f"{token[:6]}…{token[-4:]}"
