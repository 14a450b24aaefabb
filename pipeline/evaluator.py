"""
ResultsEvaluator: summarises saved AnalysisResult JSON files from a batch run.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path

logger = logging.getLogger("forensix.evaluator")
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[evaluator] %(message)s"))
    logger.addHandler(_handler)


RESULTS_DIR = Path(__file__).parent.parent / "outputs" / "results"


class ResultsEvaluator:
    """
    Loads result JSON files and computes batch statistics.

    Usage:
        ev = ResultsEvaluator()
        ev.load_results()
        print(ev.verdict_counts())
        riskiest = ev.highest_risk_cases(n=3)
    """

    def __init__(self, results_dir: Path = RESULTS_DIR):
        self.results_dir = Path(results_dir)
        self._results: list[dict] = []

    def load_results(self) -> None:
        """Load all ``*.json`` result files from ``results_dir``."""
        self._results = []
        for path in sorted(self.results_dir.glob("*.json")):
            with open(path, encoding="utf-8") as f:
                self._results.append(json.load(f))
        logger.info("Loaded %d result file(s) from %s", len(self._results), self.results_dir)

    @property
    def results(self) -> list[dict]:
        return list(self._results)

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def verdict_counts(self) -> dict[str, int]:
        counts = {"GENUINE": 0, "FORGED": 0}
        for r in self._results:
            counts[r["verdict"]] = counts.get(r["verdict"], 0) + 1
        return counts

    def mean_final_score(self) -> float:
        if not self._results:
            return 0.0
        return sum(r["finalScore"] for r in self._results) / len(self._results)

    def contributor_counts(self) -> dict[str, int]:
        """How often each module was the highest contributor."""
        return dict(Counter(r["highestContributor"] for r in self._results))

    def highest_risk_cases(self, n: int = 3) -> list[dict]:
        """Up to n results with the highest final score (ties keep load order)."""
        ranked = sorted(self._results, key=lambda r: r["finalScore"], reverse=True)
        return ranked[:n]

    def summary(self) -> dict:
        """Return a full batch summary dict."""
        counts = self.verdict_counts()
        total = len(self._results)
        return {
            "total_analyzed": total,
            "verdicts": counts,
            "forged_rate": round(counts.get("FORGED", 0) / total, 4) if total else 0.0,
            "mean_final_score": round(self.mean_final_score(), 4),
            "highest_contributors": self.contributor_counts(),
            "highest_risk_cases": [
                {"caseId": r["caseId"], "fileName": r["fileName"], "finalScore": r["finalScore"]}
                for r in self.highest_risk_cases()
            ],
        }
