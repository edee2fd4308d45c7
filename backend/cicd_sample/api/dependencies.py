"""Request Dependencies — hand the app-owned, read-only state to handlers.

Invariants:
    - State is read from request.app.state, never from module globals
"""

from fastapi import Request

from cicd_sample.core.clock import Uptime
from cicd_sample.core.service_config import ServiceConfig
from cicd_sample.core.user_directory import UserDirectory


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.service_config


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.service_config.directory


def get_uptime(request: Request) -> Uptime:
    return request.app.state.uptime
