"""Exceptions raised by CLI commands."""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """A command failure attributed to one named stage.

    Attributes:
        stage: Stage name shown to the user and in phase logs, e.g. `config`.
        detail: What went wrong; also the exception message.
        hint: Optional next step printed after the failure line.
    """

    def __init__(self, *, stage: str, detail: str, hint: str | None = None) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

    def headline(self, command_name: str) -> str:
        """Return the one-line failure summary for `command_name`."""

        return f"{command_name} failed at stage `{self.stage}`: {self.detail}"
