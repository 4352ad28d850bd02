"""Payload Parsing — validates request bodies inside the handler.

Invariants:
    - Body is read only after route dependencies (auth) have passed
    - Malformed JSON and schema mismatches both raise PayloadValidationError
    - Each endpoint chooses its own client-facing message

Design Decisions:
    - Manual parse over FastAPI body params: FastAPI decodes JSON before
      running dependencies, which would let a malformed body answer 400 on a
      protected route instead of 403
"""

import json
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from wellspring.core.errors import PayloadValidationError

M = TypeVar("M", bound=BaseModel)


def _error_details(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


async def read_json(request: Request) -> object:
    """Decoded JSON body; an empty body reads as {}."""
    raw = await request.body()
    if not raw:
        return {}
    return json.loads(raw)


async def parse_payload(
    request: Request, schema: type[M], message: str,
) -> M:
    """Decode and validate the request body against schema."""
    try:
        data = await read_json(request)
    except ValueError as e:
        raise PayloadValidationError(
            message, [{"field": "body", "message": str(e), "type": "json_invalid"}],
        ) from e
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError(message, _error_details(e)) from e
