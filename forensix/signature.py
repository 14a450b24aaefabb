from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from .seed import seeded_random
from .utils import round_half_up

SIMILARITY_SLOPE = 0.7


@dataclass(frozen=True)
class BoundingBox:
    """Highlight rectangle in page pixel coordinates ``(x, y, width, height)``."""

    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class SignatureResult:
    score: float
    bounding_box: BoundingBox
    similarity_index: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signature_score": self.score,
            "bounding_box_highlight": self.bounding_box.to_dict(),
            "similarity_index": self.similarity_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignatureResult":
        box = data["bounding_box_highlight"]
        return cls(
            score=float(data["signature_score"]),
            bounding_box=BoundingBox(
                x=int(box["x"]), y=int(box["y"]),
                width=int(box["width"]), height=int(box["height"]),
            ),
            similarity_index=float(data["similarity_index"]),
        )


def analyze_signature(seed: int) -> SignatureResult:
    score = 0.1 + seeded_random(seed, 4) * 0.8
    similarity = 1 - score * SIMILARITY_SLOPE

    # Indexes 5..8 are positional: x, y, width, height.
    box = BoundingBox(
        x=math.floor(seeded_random(seed, 5) * 200) + 100,
        y=math.floor(seeded_random(seed, 6) * 300) + 400,
        width=math.floor(seeded_random(seed, 7) * 100) + 150,
        height=math.floor(seeded_random(seed, 8) * 30) + 40,
    )

    return SignatureResult(
        score=round_half_up(score, 3),
        bounding_box=box,
        similarity_index=round_half_up(similarity, 3),
    )
