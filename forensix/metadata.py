from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .seed import seeded_random
from .utils import classify_risk, round_half_up

TIMESTAMP_GAP = "Creation timestamp post-dates modification timestamp by 47 minutes"
AUTHOR_FIELD_MODIFIED = "Author field modified after initial document creation"
SOFTWARE_MISMATCH = "Editing software inconsistent with declared document origin"
MULTIPLE_SESSIONS = "Metadata contains traces of multiple editing sessions from different applications"
CONSISTENT_TIMESTAMPS = "Timestamps are consistent and sequential"
NO_ANOMALIES = "No significant metadata anomalies detected"

# (comparison, threshold, finding) in report order; several may fire at once.
_FINDINGS = (
    (">", 0.5, TIMESTAMP_GAP),
    (">", 0.3, AUTHOR_FIELD_MODIFIED),
    (">", 0.6, SOFTWARE_MISMATCH),
    (">", 0.7, MULTIPLE_SESSIONS),
    ("<", 0.4, CONSISTENT_TIMESTAMPS),
)


@dataclass(frozen=True)
class MetadataResult:
    score: float
    risk_level: str                     # "low" | "medium" | "high"
    evidence: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata_score": self.score,
            "metadata_risk_level": self.risk_level,
            "metadata_evidence": list(self.evidence),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataResult":
        return cls(
            score=float(data["metadata_score"]),
            risk_level=str(data["metadata_risk_level"]),
            evidence=tuple(data.get("metadata_evidence", [])),
        )


def metadata_findings(score: float) -> Tuple[str, ...]:
    findings = []
    for op, threshold, text in _FINDINGS:
        if (score > threshold) if op == ">" else (score < threshold):
            findings.append(text)
    if not findings:
        findings.append(NO_ANOMALIES)
    return tuple(findings)


def analyze_metadata(seed: int) -> MetadataResult:
    score = 0.15 + seeded_random(seed, 1) * 0.75
    return MetadataResult(
        score=round_half_up(score, 3),
        risk_level=classify_risk(score),
        evidence=metadata_findings(score),
    )
