from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .rng import DeterministicRng
from .vector import Vector2

logger = logging.getLogger(__name__)


@dataclass
class RandomConfig:
    seed: Optional[int] = None


@dataclass
class FormatConfig:
    precision: Optional[int] = None


@dataclass
class VectaConfig:
    random: RandomConfig = field(default_factory=RandomConfig)
    format: FormatConfig = field(default_factory=FormatConfig)

    @staticmethod
    def from_yaml(path: Path) -> "VectaConfig":
        logger.debug("Loading vecta config from %s", path)
        data = yaml.safe_load(Path(path).read_text())
        return load_config(data or {})

    def make_rng(self) -> Optional[DeterministicRng]:
        if self.random.seed is None:
            return None
        return DeterministicRng(self.random.seed)


def load_config(raw: dict) -> VectaConfig:
    random_config = RandomConfig(**(raw.get("random") or {}))
    format_config = FormatConfig(**(raw.get("format") or {}))
    unknown = set(raw) - {"random", "format"}
    if unknown:
        raise TypeError(f"Unknown config sections: {sorted(unknown)}")
    logger.debug("Loaded vecta config: seed=%s precision=%s", random_config.seed, format_config.precision)
    return VectaConfig(random=random_config, format=format_config)


def format_vector(vector: Vector2, config: Optional[VectaConfig] = None) -> str:
    precision = None if config is None else config.format.precision
    if precision is None:
        return str(vector)
    return format(vector, f".{int(precision)}f")
