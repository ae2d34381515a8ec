"""Original text of lines that may still be reported as erroneous."""

from __future__ import annotations

from roadlog.exceptions import RoadlogInvariantError


class HistoryTable:
    """Line number -> original line text for open pending reports."""

    def __init__(self) -> None:
        self._lines: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, line_no: object) -> bool:
        return line_no in self._lines

    def remember(self, line_no: int, text: str) -> None:
        self._lines[line_no] = text

    def recall(self, line_no: int) -> str:
        try:
            return self._lines[line_no]
        except KeyError:
            raise RoadlogInvariantError(f"no history recorded for line {line_no}") from None

    def forget(self, line_no: int) -> None:
        self._lines.pop(line_no, None)
