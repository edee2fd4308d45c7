"""Entry point for `python -m cicd_sample`."""

from cicd_sample.main import run

run()
