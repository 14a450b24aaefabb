from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .seed import seeded_random
from .utils import round_half_up

ANOMALY_X_INDEX_BASE = 20
ANOMALY_Y_INDEX_BASE = 30
PAGE_WIDTH = 600
PAGE_HEIGHT = 800


@dataclass(frozen=True)
class AnomalyPoint:
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class HandwritingResult:
    score: float
    anomaly_map: Tuple[AnomalyPoint, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "handwriting_score": self.score,
            "anomaly_map": [p.to_dict() for p in self.anomaly_map],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HandwritingResult":
        return cls(
            score=float(data["handwriting_score"]),
            anomaly_map=tuple(
                AnomalyPoint(x=int(p["x"]), y=int(p["y"])) for p in data.get("anomaly_map", [])
            ),
        )


def analyze_handwriting(seed: int) -> HandwritingResult:
    score = 0.1 + seeded_random(seed, 9) * 0.75
    # At most 6 points: score < 0.85 keeps floor(score * 8) below 7.
    count = math.floor(score * 8)

    anomalies = tuple(
        AnomalyPoint(
            x=math.floor(seeded_random(seed, ANOMALY_X_INDEX_BASE + i) * PAGE_WIDTH),
            y=math.floor(seeded_random(seed, ANOMALY_Y_INDEX_BASE + i) * PAGE_HEIGHT),
        )
        for i in range(count)
    )

    return HandwritingResult(score=round_half_up(score, 3), anomaly_map=anomalies)
