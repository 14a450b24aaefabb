"""
ReportAssembler: runs the full scoring flow for one file and packages the
outcome into an immutable AnalysisResult.

Flow
----
  1. derive_seed          32-bit seed from name / size / MIME type
  2. analyze_metadata     metadata forensics score + findings
  3. analyze_linguistic   tone-shift score + suspicious paragraphs
  4. analyze_signature    signature score + highlight box
  5. analyze_handwriting  handwriting score + anomaly map
  6. Aggregator           weighted final score, verdict, explanation
  7. AnalysisResult       case id + UTC timestamp + everything above

The module steps only read the seed, so their order does not matter. The
clock is the only non-deterministic input and only feeds ``analyzed_at``.

Usage
-----
    from forensix import FileDescriptor, run_analysis
    result = run_analysis(FileDescriptor("report.pdf", 102400, "application/pdf"))
    result.to_dict()["verdict"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Tuple

from .aggregator import Aggregator, ScoreBreakdownEntry
from .handwriting import HandwritingResult, analyze_handwriting
from .linguistic import LinguisticResult, analyze_linguistic
from .metadata import MetadataResult, analyze_metadata
from .seed import seed_for
from .signature import SignatureResult, analyze_signature
from .utils import FileDescriptor

logger = logging.getLogger(__name__)

CASE_ID_PREFIX = "FX-"
CASE_ID_HEX_DIGITS = 8

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_case_id(seed: int) -> str:
    """``FX-`` + uppercase hex of the seed, cut to 8 digits, no zero padding."""
    return CASE_ID_PREFIX + format(seed, "X")[:CASE_ID_HEX_DIGITS]


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


@dataclass(frozen=True)
class AnalysisResult:
    """Terminal record of one analysis run."""

    case_id: str
    file_name: str
    file_size: int
    file_type: str
    analyzed_at: str

    metadata: MetadataResult
    linguistic: LinguisticResult
    signature: SignatureResult
    handwriting: HandwritingResult

    final_score: float
    confidence: float
    verdict: str                        # "GENUINE" | "FORGED"
    highest_contributor: str
    explanation: str
    score_breakdown: Tuple[ScoreBreakdownEntry, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "caseId": self.case_id,
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "fileType": self.file_type,
            "analyzedAt": self.analyzed_at,
            "metadata": self.metadata.to_dict(),
            "linguistic": self.linguistic.to_dict(),
            "signature": self.signature.to_dict(),
            "handwriting": self.handwriting.to_dict(),
            "finalScore": self.final_score,
            "confidence": self.confidence,
            "verdict": self.verdict,
            "highestContributor": self.highest_contributor,
            "explanation": self.explanation,
            "scoreBreakdown": [entry.to_dict() for entry in self.score_breakdown],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """Rebuild a result from its ``to_dict()`` form (e.g. a saved JSON file)."""
        return cls(
            case_id=str(data["caseId"]),
            file_name=str(data["fileName"]),
            file_size=int(data["fileSize"]),
            file_type=str(data["fileType"]),
            analyzed_at=str(data["analyzedAt"]),
            metadata=MetadataResult.from_dict(data["metadata"]),
            linguistic=LinguisticResult.from_dict(data["linguistic"]),
            signature=SignatureResult.from_dict(data["signature"]),
            handwriting=HandwritingResult.from_dict(data["handwriting"]),
            final_score=float(data["finalScore"]),
            confidence=float(data["confidence"]),
            verdict=str(data["verdict"]),
            highest_contributor=str(data["highestContributor"]),
            explanation=str(data["explanation"]),
            score_breakdown=tuple(
                ScoreBreakdownEntry.from_dict(entry) for entry in data.get("scoreBreakdown", [])
            ),
        )


class ReportAssembler:
    """
    Builds AnalysisResult records.

    Args:
        aggregator: Aggregator instance (a default one is created if omitted).
        clock: zero-argument callable returning the analysis time; defaults to
               the current UTC wall-clock time.
    """

    def __init__(self, aggregator: Optional[Aggregator] = None, clock: Optional[Clock] = None):
        self.aggregator = aggregator or Aggregator()
        self.clock = clock or _utc_now

    def assemble(self, descriptor: FileDescriptor) -> AnalysisResult:
        seed = seed_for(descriptor)

        metadata = analyze_metadata(seed)
        linguistic = analyze_linguistic(seed)
        signature = analyze_signature(seed)
        handwriting = analyze_handwriting(seed)

        outcome = self.aggregator.aggregate(metadata, linguistic, signature, handwriting)
        case_id = make_case_id(seed)
        logger.debug(
            "%s: seed=%d final=%.4f verdict=%s", case_id, seed, outcome.final_score, outcome.verdict,
        )

        return AnalysisResult(
            case_id=case_id,
            file_name=descriptor.name,
            file_size=descriptor.size_bytes,
            file_type=descriptor.mime_type,
            analyzed_at=iso_timestamp(self.clock()),
            metadata=metadata,
            linguistic=linguistic,
            signature=signature,
            handwriting=handwriting,
            final_score=outcome.final_score,
            confidence=outcome.confidence,
            verdict=outcome.verdict,
            highest_contributor=outcome.highest_contributor,
            explanation=outcome.explanation,
            score_breakdown=outcome.score_breakdown,
        )


def run_analysis(descriptor: FileDescriptor, clock: Optional[Clock] = None) -> AnalysisResult:
    """Core entry point: total and synchronous for any well-formed descriptor."""
    return ReportAssembler(clock=clock).assemble(descriptor)
