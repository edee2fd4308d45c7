"""Service Config — immutable values the service is started with.

Invariants:
    - Built once at startup and handed to create_app(); handlers only read it
    - Holds the UserDirectory, so each app instance owns its own seed

Design Decisions:
    - Explicit object over module-level globals: tests build isolated apps with
      different seeds and can run in parallel
"""

from dataclasses import dataclass, field

from cicd_sample.core.user_directory import UserDirectory

DEFAULT_MESSAGE = "Welcome to CI/CD Sample Application"
DEFAULT_VERSION = "1.0.0"


@dataclass(frozen=True)
class ServiceConfig:
    """Read-only configuration for one running service instance."""
    message: str = DEFAULT_MESSAGE
    version: str = DEFAULT_VERSION
    directory: UserDirectory = field(default_factory=UserDirectory)
