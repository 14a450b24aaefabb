"""
forensix: Deterministic document forgery scoring engine.

Every score is derived from the file's identity (name, size, declared MIME
type), never from its content, so repeated runs on the same file produce the
same scores, verdict and case id.

Modules
-------
seed            Seed derivation (32-bit string fold) and the
                ``fract(sin(x) * k)`` sampler.
metadata        Metadata forensics score, risk level and findings.
linguistic      Tone-shift score, suspicious paragraph indexes, explanation.
signature       Signature score, similarity index and highlight box.
handwriting     Handwriting score and anomaly map.
aggregator      Fixed-weight combination, verdict and explanation.
report          AnalysisResult record, ReportAssembler and ``run_analysis``.
utils           FileDescriptor, risk thresholds and rounding helpers.

Usage
-----
    from forensix import FileDescriptor, run_analysis

    result = run_analysis(FileDescriptor("report.pdf", 102400, "application/pdf"))
    print(result.verdict, result.confidence)
"""

from .aggregator import AggregateResult, Aggregator, ScoreBreakdownEntry
from .report import AnalysisResult, ReportAssembler, run_analysis
from .seed import derive_seed, seeded_random
from .utils import FileDescriptor

__all__ = [
    "AggregateResult",
    "Aggregator",
    "AnalysisResult",
    "FileDescriptor",
    "ReportAssembler",
    "ScoreBreakdownEntry",
    "derive_seed",
    "run_analysis",
    "seeded_random",
]
