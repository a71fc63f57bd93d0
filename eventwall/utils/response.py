from typing import Any

from pydantic import BaseModel


def _encode(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, (list, tuple)):
        return [_encode(item) for item in data]
    return data


def success_response(data: Any = None, message: str | None = None) -> dict:
    """Success envelope; pydantic models (and lists of them) are dumped with camelCase keys."""
    return {"status": "success", "data": _encode(data), "message": message}


def error_response(message: str, data: Any = None) -> dict:
    return {"status": "error", "data": _encode(data), "message": message}
