"""Echo Endpoint — reflects the decoded JSON body back to the caller.

Invariants:
    - received deep-equals the submitted JSON value (objects, arrays, scalars)
    - Empty body is received as {}
    - Undecodable body (including NaN/Infinity literals) raises InvalidBodyError → 400
"""

import json

from fastapi import Request

from cicd_sample.core.clock import utc_timestamp
from cicd_sample.core.errors import ErrorContext, InvalidBodyError


async def echo(request: Request):
    """Echo back the request body."""
    return {"received": await _read_json(request), "timestamp": utc_timestamp()}


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


async def _read_json(request: Request):
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidBodyError(
            str(e), ErrorContext(path=request.url.path),
        ) from e
