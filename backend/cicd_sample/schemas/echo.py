"""Echo Schemas — reflected request bodies.

Invariants:
    - received is passed through untouched (no coercion, no field stripping)
"""

from typing import Any

from pydantic import BaseModel


class EchoResponse(BaseModel):
    """POST /api/echo — the decoded body plus the time it was received."""
    received: Any
    timestamp: str
