"""Telemetry and observability helpers.

This package emits deterministic command events for auditing CLI runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
