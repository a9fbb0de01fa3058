from __future__ import annotations
from .detectors.tin import NorwegianTinDetector
from .models import ScanResult, TinKind


class TinScanner:
    """Find Norwegian identifiers in text and replace them by their masked form."""

    def __init__(self, include_test_ids: bool = True) -> None:
        self._include_test_ids = include_test_ids
        self._disabled: set[TinKind] = set()

    def disable_kind(self, kind: TinKind) -> None:
        self._disabled.add(kind)

    def enable_kind(self, kind: TinKind) -> None:
        self._disabled.discard(kind)

    def scan(self, text: str) -> ScanResult:
        detector = NorwegianTinDetector(
            kinds=set(TinKind) - self._disabled,
            include_test_ids=self._include_test_ids,
        )
        # The detector never returns overlapping spans.
        findings = detector.detect(text)

        # Replace in reverse order to keep positions valid
        masked = text
        for finding in sorted(findings, key=lambda f: f.start, reverse=True):
            masked = masked[: finding.start] + finding.masked + masked[finding.end :]

        return ScanResult(original_text=text, masked_text=masked, findings=findings)
