"""Error Hierarchy — typed exceptions for every failure the service reports.

Invariants:
    - Every error has a code (str), a user-facing message and an http_status
    - to_response() produces the public envelope {"error": <message>}
    - Non-numeric user ids are folded into UserNotFoundError (no separate 400)

Design Decisions:
    - Single hierarchy with SampleServiceError base: one global handler catches all
    - Flat string envelope: deployment smoke tests match on the exact message
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ErrorContext:
    """Observability context attached to an error, never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    detail: str | None = None


class SampleServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class UserNotFoundError(SampleServiceError):
    """Requested user id is unknown, out of range or not an integer."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.detail = f"user id {raw_id!r}"
        super().__init__("User not found", "USER_NOT_FOUND", 404, ctx)
        self.raw_id = raw_id


class RouteNotFoundError(SampleServiceError):
    """No route matches the request method and path."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Route not found", "ROUTE_NOT_FOUND", 404, context)


class InvalidBodyError(SampleServiceError):
    """Request body could not be decoded as JSON."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.detail = reason
        super().__init__("Invalid JSON body", "INVALID_BODY", 400, ctx)


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalServiceError(SampleServiceError):
    """Unexpected failure — message is generic, details stay in the logs."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Internal server error", "INTERNAL_ERROR", 500, context)
