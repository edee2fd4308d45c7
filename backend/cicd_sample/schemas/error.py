"""Error Schemas — the shared {"error": <message>} envelope."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope shared by every non-2xx response."""
    error: str
