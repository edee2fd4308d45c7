"""Liveness Probe — checks a running instance's /health endpoint.

Used by the container HEALTHCHECK and by post-deploy smoke tests.

Invariants:
    - Healthy means HTTP 200 AND body {"status": "healthy"}; anything else is unhealthy
    - Transport failures (refused, timeout, bad JSON) are unhealthy, never raised
    - Exit code 0 when healthy, 1 otherwise
"""

import argparse
import logging
import sys

import httpx

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 3.0


def check_health(
    base_url: str = DEFAULT_URL,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> bool:
    """Return True if GET {base_url}/health reports a healthy instance."""
    url = base_url.rstrip("/") + "/health"
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            res = client.get(url)
    except httpx.HTTPError as e:
        logger.warning(f"Health probe to {url} failed: {e}")
        return False

    if res.status_code != 200:
        logger.warning(
            f"Health probe to {url} returned {res.status_code}",
            extra={"status_code": res.status_code, "path": "/health"},
        )
        return False
    try:
        body = res.json()
    except ValueError:
        logger.warning(f"Health probe to {url} returned a non-JSON body")
        return False
    return isinstance(body, dict) and body.get("status") == "healthy"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cicd-sample-probe",
        description="Exit 0 if the service's /health endpoint is healthy, 1 otherwise.",
    )
    parser.add_argument("--url", default=DEFAULT_URL, help="base URL of the service")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="request timeout in seconds",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    healthy = check_health(args.url, args.timeout)
    print("healthy" if healthy else "unhealthy")
    return 0 if healthy else 1


if __name__ == "__main__":
    sys.exit(main())
