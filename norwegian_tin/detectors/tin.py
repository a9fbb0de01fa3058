from __future__ import annotations
import re
from collections.abc import Iterable
from .base import BaseDetector
from ..errors import NorwegianTinError
from ..models import Finding, TinKind
from ..parser import parse

# Candidates start at a digit that follows a non-digit and must end before one:
#   11-digit personal number, raw or as DDMMYY NNNNN
#   9-digit organisation number, raw or as NNN NNN NNN
# Every shape is tried at every start, so a digit group that does not parse
# (e.g. "123" in "123 905 661 833") does not hide a valid number after it.
_CANDIDATE_START = re.compile(r"(?<!\d)\d", re.ASCII)
_CANDIDATE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern + r"(?!\d)", re.ASCII)
    for pattern in (
        r"\d{6}[ ]\d{5}",  # personal, formatted
        r"\d{3}[ ]\d{3}[ ]\d{3}",  # organisation, formatted
        r"\d{11}",
        r"\d{9}",
    )
)


class NorwegianTinDetector(BaseDetector):
    def __init__(
        self,
        kinds: Iterable[TinKind] | None = None,
        include_test_ids: bool = True,
    ) -> None:
        self._kinds: set[TinKind] = set(kinds) if kinds is not None else set(TinKind)
        self._include_test_ids = include_test_ids

    def detect(self, text: str) -> list[Finding]:
        findings: list[Finding] = []
        last_end = -1

        for start_match in _CANDIDATE_START.finditer(text):
            start = start_match.start()
            if start < last_end:
                continue  # inside an accepted finding

            for pattern in _CANDIDATE_PATTERNS:
                match = pattern.match(text, start)
                if match is None:
                    continue
                raw = match.group()
                try:
                    tin = parse(raw.replace(" ", ""))
                except NorwegianTinError:
                    continue  # most digit runs are not identifiers

                if tin.kind not in self._kinds:
                    continue
                if tin.is_test_id and not self._include_test_ids:
                    continue

                findings.append(
                    Finding(
                        kind=tin.kind,
                        start=match.start(),
                        end=match.end(),
                        text=raw,
                        category=tin.category,
                        masked=tin.masked(),
                        confidence=1.0,
                    )
                )
                last_end = match.end()
                break

        return findings
