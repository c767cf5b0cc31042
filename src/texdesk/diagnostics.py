"""Turn raw compiler output into line-addressed diagnostics."""

from __future__ import annotations

import re

from texdesk.models import Diagnostic, Severity

FALLBACK_MESSAGE = "Compilation error"

_ERROR_LINE = re.compile(r"^error:\s*(\S.*)$")
_ANCHOR_LINE = re.compile(r"^l\.(\d+)")


class LogScanner:
    """Two-state scanner pairing ``error:`` messages with later ``l.N`` anchors.

    While awaiting an anchor the scanner holds at most one pending message. A
    newer message replaces an older unanchored one, and an anchor without a
    pending message gets the generic fallback text.
    """

    def __init__(self) -> None:
        self.pending_message: str | None = None
        self.diagnostics: list[Diagnostic] = []

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()

        error_match = _ERROR_LINE.match(line)
        if error_match:
            self.pending_message = error_match.group(1).strip()
            return

        anchor_match = _ANCHOR_LINE.match(line)
        if anchor_match:
            try:
                line_number = int(anchor_match.group(1))
            except ValueError:
                line_number = 0
            self.diagnostics.append(
                Diagnostic(
                    line=line_number,
                    message=self.pending_message or FALLBACK_MESSAGE,
                    severity=Severity.ERROR,
                )
            )
            self.pending_message = None


def extract_diagnostics(log: str) -> list[Diagnostic]:
    """Parse a compiler log into diagnostics, in order of appearance.

    Always returns at least one diagnostic: when nothing is anchored, the whole
    trimmed log becomes a single line-0 entry.
    """

    scanner = LogScanner()
    for raw_line in log.split("\n"):
        scanner.feed(raw_line)

    if scanner.diagnostics:
        return scanner.diagnostics

    return [Diagnostic(line=0, message=log.strip() or FALLBACK_MESSAGE)]
