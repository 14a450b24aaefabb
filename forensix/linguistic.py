from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .seed import seeded_random
from .utils import HIGH_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD, percent_text, round_half_up

SUSPICIOUS_PARAGRAPH_THRESHOLD = 0.55
PARAGRAPH_INDEX_BASE = 10

CONSISTENT_TEXT = (
    "Linguistic patterns are consistent throughout the document. "
    "No significant tone shifts or vocabulary anomalies detected."
)


@dataclass(frozen=True)
class LinguisticResult:
    score: float
    suspicious_paragraph_indexes: Tuple[int, ...]
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "linguistic_score": self.score,
            "suspicious_paragraph_indexes": list(self.suspicious_paragraph_indexes),
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinguisticResult":
        return cls(
            score=float(data["linguistic_score"]),
            suspicious_paragraph_indexes=tuple(int(i) for i in data.get("suspicious_paragraph_indexes", [])),
            explanation=str(data.get("explanation", "")),
        )


def linguistic_explanation(score: float, suspicious_count: int) -> str:
    if score > HIGH_RISK_THRESHOLD:
        return (
            "Detected significant tone shift between sections. "
            f"Vocabulary complexity variance of {percent_text(score)}% exceeds acceptable threshold. "
            "Semantic drift pattern suggests content from multiple authors."
        )
    if score > MEDIUM_RISK_THRESHOLD:
        return (
            "Moderate linguistic inconsistencies detected. "
            f"Minor vocabulary shifts observed across {suspicious_count} paragraph(s). "
            "Pattern variance within acceptable range but flagged for review."
        )
    return CONSISTENT_TEXT


def analyze_linguistic(seed: int) -> LinguisticResult:
    score = 0.1 + seeded_random(seed, 2) * 0.8
    paragraph_count = math.floor(seeded_random(seed, 3) * 5) + 3

    suspicious = tuple(
        i for i in range(paragraph_count)
        if seeded_random(seed, PARAGRAPH_INDEX_BASE + i) > SUSPICIOUS_PARAGRAPH_THRESHOLD
    )

    return LinguisticResult(
        score=round_half_up(score, 3),
        suspicious_paragraph_indexes=suspicious,
        explanation=linguistic_explanation(score, len(suspicious)),
    )
