"""Lenient JSON body parsing for the API endpoints."""

from typing import Any, Callable, Awaitable, TypeVar
import json
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the JSON object body of a request.

    Absent bodies, non-JSON content types and JSON values that are not
    objects all read as ``{}``. Only a JSON body that fails to decode is
    rejected.
    """
    body = await request.body()
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if not body or not (content_type == "application/json" or content_type.endswith("+json")):
        return {}

    try:
        data = json.loads(body)
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}"}]
        ) from e

    return data if isinstance(data, dict) else {}


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """FastAPI dependency that validates the lenient JSON body as ``model``."""

    async def dependency(request: Request) -> ModelT:
        data = await read_json_object(request)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return dependency
