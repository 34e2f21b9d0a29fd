from datetime import date
from fastapi import HTTPException, Request

from ..errors import InvalidArgumentError
from ..periods import parse_date
from ..services import RecordStore


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store opened at startup."""
    return request.app.state.store


def reference_date_or_today(value: str | None) -> date:
    """Parse an optional reference_date query value; default is today."""
    if not value:
        return date.today()
    try:
        return parse_date(value)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
