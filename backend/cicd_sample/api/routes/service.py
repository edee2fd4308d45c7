"""Service Endpoints — banner and liveness probe.

Invariants:
    - GET /health always returns 200 while the process is up (liveness)
    - GET /health has no side effects and does no I/O
"""

from fastapi import Depends

from cicd_sample.api.dependencies import get_service_config, get_uptime
from cicd_sample.core.clock import Uptime, utc_timestamp
from cicd_sample.core.service_config import ServiceConfig


async def welcome(config: ServiceConfig = Depends(get_service_config)):
    """Service banner with version."""
    return {
        "message": config.message,
        "version": config.version,
        "timestamp": utc_timestamp(),
    }


async def health_check(uptime: Uptime = Depends(get_uptime)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "uptime": uptime.seconds(),
        "timestamp": utc_timestamp(),
    }
