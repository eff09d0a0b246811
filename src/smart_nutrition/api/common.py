"""Helpers shared by the user-scoped routers."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException, status

from smart_nutrition.config import Settings


def resolve_timezone(settings: Settings, tz: str | None) -> str:
    """Return the requested timezone or the configured default."""
    timezone_name = tz or settings.default_timezone
    try:
        ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {timezone_name}",
        ) from exc
    return timezone_name


def not_found(detail: str) -> HTTPException:
    """Build a 404 error for a missing or foreign record."""
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
