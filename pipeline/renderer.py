"""
Plain-text case report for a single AnalysisResult.

Mirrors what the dashboard shows: verdict and confidence, the explanation,
one card per module (score, risk band, weight, weighted contribution,
details) and the score breakdown table.
"""

from __future__ import annotations

from typing import List

from forensix import AnalysisResult
from forensix.utils import HIGH_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD, to_fixed

RULE = "=" * 64


def format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1048576:
        return f"{to_fixed(size_bytes / 1024, 1)} KB"
    return f"{to_fixed(size_bytes / 1048576, 1)} MB"


def risk_band(score: float) -> str:
    if score > HIGH_RISK_THRESHOLD:
        return "HIGH"
    if score > MEDIUM_RISK_THRESHOLD:
        return "MEDIUM"
    return "LOW"


def module_details(result: AnalysisResult) -> List[List[str]]:
    """Detail lines per module, in breakdown order."""
    return [
        list(result.metadata.evidence),
        [result.linguistic.explanation],
        [f"Similarity index: {to_fixed(result.signature.similarity_index * 100, 1)}%"],
        [f"{len(result.handwriting.anomaly_map)} anomaly point(s) detected"],
    ]


def render_text_report(result: AnalysisResult) -> str:
    lines: List[str] = []
    lines.append(RULE)
    lines.append("ForensiX Document Analysis Report")
    lines.append(RULE)
    lines.append(f"Case ID      : {result.case_id}")
    lines.append(f"Analyzed at  : {result.analyzed_at}")
    lines.append(f"Document     : {result.file_name or '(unnamed)'}")
    lines.append(f"Size         : {format_size(result.file_size)}")
    lines.append(f"Type         : {result.file_type or 'Unknown type'}")
    lines.append("")
    lines.append(f"Verdict      : {result.verdict}")
    lines.append(f"Confidence   : {to_fixed(result.confidence, 1)}%")
    lines.append(f"Final score  : {to_fixed(result.final_score * 100, 2)}%")
    lines.append(f"Highest risk : {result.highest_contributor}")
    lines.append("")
    lines.append("[Explanation]")
    lines.append(f"  {result.explanation}")
    lines.append("")

    for entry, details in zip(result.score_breakdown, module_details(result)):
        lines.append(
            f"[{entry.module}] {to_fixed(entry.score * 100, 1)}% ({risk_band(entry.score)})"
        )
        lines.append(
            f"  Weight: {to_fixed(entry.weight * 100, 0)}% | "
            f"Weighted contribution: {to_fixed(entry.weighted * 100, 2)}%"
        )
        for detail in details:
            lines.append(f"  - {detail}")
        lines.append("")

    lines.append("[Score Breakdown]")
    lines.append(f"  {'Module':<26}{'Weight':>8}{'Score':>8}{'Weighted':>10}")
    for entry in result.score_breakdown:
        lines.append(
            f"  {entry.module:<26}{to_fixed(entry.weight, 2):>8}"
            f"{to_fixed(entry.score, 3):>8}{to_fixed(entry.weighted, 4):>10}"
        )
    lines.append(f"  {'Total':<26}{'':>8}{'':>8}{to_fixed(result.final_score, 4):>10}")
    lines.append(RULE)
    return "\n".join(lines) + "\n"
