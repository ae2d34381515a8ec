"""Positional error diagnostics."""

from __future__ import annotations

from pydantic import Field

from roadlog._constants import DIAGNOSTIC_FORMAT
from roadlog.models._base import RoadlogModel


class Diagnostic(RoadlogModel):
    """A rejected line, identified by its number and original text."""

    line_no: int = Field(..., ge=1)
    text: str

    def render(self) -> str:
        return DIAGNOSTIC_FORMAT.format(line_no=self.line_no, text=self.text)
