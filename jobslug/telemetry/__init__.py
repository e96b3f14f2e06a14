"""Telemetry helpers.

This package emits phase-level run events for deterministic CLI auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
