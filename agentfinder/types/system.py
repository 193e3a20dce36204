"""System maintenance request models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class TrainRequest:
    """Options for retraining the recommender."""

    use_cache: bool = True
    save_cache: bool = True

    def to_payload(self) -> dict[str, Any]:
        return {"use_cache": self.use_cache, "save_cache": self.save_cache}
