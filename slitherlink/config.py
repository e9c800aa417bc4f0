"""
Generation Config
=================
Tuning constants for loop carving and clue selection, with environment
overrides for the few values worth adjusting without code changes.

Priority for every overridable value:
1) explicit keyword passed to resolve_config()
2) environment variable (SLITHERLINK_MAX_ATTEMPTS, SLITHERLINK_SQUARE_CAP,
   SLITHERLINK_HEX_CAP)
3) the dataclass default
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


# Retention thresholds: a cell whose full number is n is revealed when
# rng.random() > threshold[n].
SQUARE_RETENTION_THRESHOLDS: Dict[int, float] = {0: 0.15, 1: 0.55, 2: 0.60, 3: 0.15, 4: 0.25}
HEX_RETENTION_THRESHOLDS: Dict[int, float] = {0: 0.1, 1: 0.4, 2: 0.5, 3: 0.5, 4: 0.4, 5: 0.1, 6: 0.1}


@dataclass(frozen=True)
class GenerationConfig:
    """Every knob the generators read. Instances are immutable and safe to share across threads."""

    # Outer retry policy (both topologies)
    max_attempts: int = 10
    carve_divisor: int = 3          # targetCarve = cells // carve_divisor
    carve_slack: int = 2            # attempt fails if carved < target - slack

    # Square carving
    square_candidates_per_iteration: int = 5
    square_max_consecutive_failures: int = 20
    square_iteration_factor: int = 3
    square_connectivity_min_carved: int = 3

    # Hex carving
    hex_candidates_per_iteration: int = 10
    hex_max_consecutive_failures: int = 30
    hex_iteration_factor: int = 5
    hex_min_inside: int = 3

    # Clue selection
    square_clue_cap: float = 0.50
    hex_clue_cap: float = 0.55
    backfill_block_size: int = 2
    backfill_attempts: int = 2
    square_retention: Dict[int, float] = field(default_factory=lambda: dict(SQUARE_RETENTION_THRESHOLDS))
    hex_retention: Dict[int, float] = field(default_factory=lambda: dict(HEX_RETENTION_THRESHOLDS))


DEFAULT_CONFIG = GenerationConfig()

_ENV_OVERRIDES = {
    "max_attempts": ("SLITHERLINK_MAX_ATTEMPTS", int),
    "square_clue_cap": ("SLITHERLINK_SQUARE_CAP", float),
    "hex_clue_cap": ("SLITHERLINK_HEX_CAP", float),
}


def _parse_positive(raw: Any, cast) -> Optional[Any]:
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        return None
    if value <= 0:
        return None
    return value


def resolve_config(base: Optional[GenerationConfig] = None, **overrides: Any) -> GenerationConfig:
    """
    Build a GenerationConfig from *base* (default config when None), the
    environment, and explicit keyword overrides. Malformed environment values
    are ignored rather than raised.
    """
    config = base or DEFAULT_CONFIG
    changes: Dict[str, Any] = {}

    for attr, (env_name, cast) in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        parsed = _parse_positive(raw, cast)
        if parsed is not None:
            changes[attr] = parsed

    for attr, value in overrides.items():
        if value is not None:
            changes[attr] = value

    if not changes:
        return config
    return replace(config, **changes)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a fresh random source; seeded when *seed* is given."""
    return random.Random(seed)


def ensure_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()
