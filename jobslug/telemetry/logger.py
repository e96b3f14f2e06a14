"""Phase logging for CLI commands.

`RunLogger` owns the loguru handler configuration for one CLI invocation and
writes one `[phase]` line per stage event. Context values are reduced to
shell-safe tokens and printed in key order, so the lines are stable enough to
grep in scripts.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from loguru import logger


_PHASE_FORMAT = (
    "[phase] level={level} stage={extra[stage]} event={extra[event]}{extra[context]}"
)
_UNSAFE_TOKEN_RE = re.compile(r"[^\w\-.:/]")


def _context_suffix(context: dict[str, object]) -> str:
    """Render ` key=value` pairs sorted by key; blank values become `none`."""

    return "".join(
        f" {key}={_UNSAFE_TOKEN_RE.sub('_', str(value).strip()) or 'none'}"
        for key, value in sorted(context.items())
    )


def _is_phase_record(record) -> bool:
    return "event" in record["extra"]


class RunLogger:
    """Write stage start/complete/failure events for one command run."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        logger.remove()
        logger.add(
            sink or sys.stderr,
            format=_PHASE_FORMAT,
            filter=_is_phase_record,
            level=level,
            colorize=False,
        )
        logger.enable("jobslug")

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        logger.bind(stage=stage, event=event, context=_context_suffix(context)).log(
            level, "{} {}", stage, event
        )

    def log_stage_start(self, stage: str, **context: object) -> None:
        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Record a failed stage by exception type only, never its message."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
