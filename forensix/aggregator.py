"""
Aggregator: folds the four module scores into a single verdict.

=== Fixed-weight scoring ===

Each module contributes ``weighted = score * weight`` with the weights below
(they sum to 1.0):

    Metadata Forensics        0.25
    Linguistic Analysis       0.30
    Signature Authenticity    0.25
    Handwriting Consistency   0.20

    finalScore = round4(sum of weighted)
    confidence = round1(finalScore * 100)
    verdict    = FORGED if finalScore > 0.6 else GENUINE

The highest contributor is the module with the largest unrounded weighted
value; ties go to the earlier module in the order above. Values are rounded
once, when they are written into the result (scores to 3 decimals, weighted
contributions to 4, confidence to 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .handwriting import HandwritingResult
from .linguistic import LinguisticResult
from .metadata import MetadataResult
from .signature import SignatureResult
from .utils import js_number, percent_text, round_half_up

METADATA_MODULE = "Metadata Forensics"
LINGUISTIC_MODULE = "Linguistic Analysis"
SIGNATURE_MODULE = "Signature Authenticity"
HANDWRITING_MODULE = "Handwriting Consistency"

MODULE_WEIGHTS: Tuple[Tuple[str, float], ...] = (
    (METADATA_MODULE, 0.25),
    (LINGUISTIC_MODULE, 0.30),
    (SIGNATURE_MODULE, 0.25),
    (HANDWRITING_MODULE, 0.20),
)

FORGED_THRESHOLD = 0.6
BASELINE_THRESHOLD = 0.5

VERDICT_FORGED = "FORGED"
VERDICT_GENUINE = "GENUINE"


@dataclass(frozen=True)
class ScoreBreakdownEntry:
    """One module's contribution to the final score."""

    module: str
    weight: float
    score: float
    weighted: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module": self.module,
            "weight": self.weight,
            "score": self.score,
            "weighted": self.weighted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreBreakdownEntry":
        return cls(
            module=str(data["module"]),
            weight=float(data["weight"]),
            score=float(data["score"]),
            weighted=float(data["weighted"]),
        )


@dataclass(frozen=True)
class AggregateResult:
    """Verdict-level output of the aggregator."""

    score_breakdown: Tuple[ScoreBreakdownEntry, ...]
    final_score: float
    confidence: float                   # percentage, 1 decimal
    verdict: str                        # "GENUINE" | "FORGED"
    highest_contributor: str
    explanation: str


def verdict_for(final_score: float) -> str:
    """Strict threshold: a final score of exactly 0.6 is GENUINE."""
    return VERDICT_FORGED if final_score > FORGED_THRESHOLD else VERDICT_GENUINE


class Aggregator:
    """
    Combines the four module results into an AggregateResult.

    Usage:
        agg = Aggregator()
        outcome = agg.aggregate(metadata, linguistic, signature, handwriting)
        outcome.verdict, outcome.final_score
    """

    weights: Tuple[Tuple[str, float], ...] = MODULE_WEIGHTS

    def aggregate(
        self,
        metadata: MetadataResult,
        linguistic: LinguisticResult,
        signature: SignatureResult,
        handwriting: HandwritingResult,
    ) -> AggregateResult:
        scores = (metadata.score, linguistic.score, signature.score, handwriting.score)
        contributions = [
            (module, weight, score, score * weight)
            for (module, weight), score in zip(self.weights, scores)
        ]

        # Left-to-right accumulation; sum() compensates float error on 3.12+.
        total = 0.0
        for _, _, _, weighted in contributions:
            total += weighted

        final_score = round_half_up(total, 4)
        confidence = round_half_up(final_score * 100, 1)
        verdict = verdict_for(final_score)

        module, _, top_score, _ = self._highest(contributions)
        explanation = self._explain(
            verdict, module, top_score, confidence,
            exceeding=sum(1 for _, _, score, _ in contributions if score > BASELINE_THRESHOLD),
        )

        breakdown = tuple(
            ScoreBreakdownEntry(
                module=module_name,
                weight=weight,
                score=round_half_up(score, 3),
                weighted=round_half_up(weighted, 4),
            )
            for module_name, weight, score, weighted in contributions
        )

        return AggregateResult(
            score_breakdown=breakdown,
            final_score=final_score,
            confidence=confidence,
            verdict=verdict,
            highest_contributor=module,
            explanation=explanation,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _highest(contributions: List[Tuple[str, float, float, float]]) -> Tuple[str, float, float, float]:
        best = contributions[0]
        for entry in contributions[1:]:
            if entry[3] > best[3]:
                best = entry
        return best

    @staticmethod
    def _explain(verdict: str, module: str, score: float, confidence: float, exceeding: int) -> str:
        if verdict == VERDICT_FORGED:
            return (
                f"High {module.lower()} risk ({percent_text(score)}%) combined with "
                f"{exceeding} modules exceeding baseline thresholds significantly "
                f"increased overall fraud probability to {js_number(confidence)}%."
            )
        return (
            "All forensic modules returned scores within acceptable thresholds. "
            f"{module} showed the highest activity at {percent_text(score)}%, "
            "but remained below critical levels."
        )
