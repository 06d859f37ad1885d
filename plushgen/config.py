"""
PlushGen Configuration

This module provides configuration settings for genome generation,
program size budgets, and logging.
"""

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from .closes import DEFAULT_CLOSE_PARENS_PROBABILITIES, CloseCountSampler
from .errors import InvalidArgument, check_integer

# Markers that may be requested per instruction entry
CLOSE = "close"
SILENT = "silent"
EPIGENETIC_MARKERS = (CLOSE, SILENT)

# Default size budget for random_push_code when the caller passes none
DEFAULT_MAX_POINTS = 100


@dataclass(frozen=True)
class GenomeConfig:
    """
    Configuration for random Plush genome generation.

    Instances are immutable; use dataclasses.replace() to derive a changed
    configuration so the close-count table is validated again.
    """
    epigenetic_markers: Tuple[str, ...] = ()
    close_parens_probabilities: Tuple[float, ...] = DEFAULT_CLOSE_PARENS_PROBABILITIES
    silent_instruction_probability: float = 0.0
    random_insertion: bool = False
    max_genome_size: int = 50
    genome_size: Optional[int] = None
    close_sampler: CloseCountSampler = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        markers = tuple(self.epigenetic_markers)
        for marker in markers:
            if marker not in EPIGENETIC_MARKERS:
                raise InvalidArgument(f"Unknown epigenetic marker: {marker!r} "
                                      f"(expected one of {EPIGENETIC_MARKERS})")
        if len(set(markers)) != len(markers):
            raise InvalidArgument(f"Duplicate epigenetic markers: {markers}")
        object.__setattr__(self, 'epigenetic_markers', markers)

        # Validates the table once, at configuration time
        sampler = CloseCountSampler(self.close_parens_probabilities)
        object.__setattr__(self, 'close_sampler', sampler)
        object.__setattr__(self, 'close_parens_probabilities', sampler.probabilities)

        if not 0.0 <= self.silent_instruction_probability <= 1.0:
            raise InvalidArgument(f"silent_instruction_probability must be in [0, 1], "
                                  f"got {self.silent_instruction_probability}")
        max_genome_size = check_integer(self.max_genome_size, "max_genome_size")
        if max_genome_size < 1:
            raise InvalidArgument(f"max_genome_size must be at least 1, got {max_genome_size}")
        if self.genome_size is not None:
            genome_size = check_integer(self.genome_size, "genome_size")
            if genome_size < 0:
                raise InvalidArgument(f"genome_size must be non-negative, got {genome_size}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GenomeConfig':
        """
        Build a GenomeConfig from a mapping.

        Keys may be snake_case or kebab-case ("epigenetic-markers"), and
        unknown keys are ignored so a full run configuration can be passed.
        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs = {}
        for key, value in data.items():
            name = key.replace('-', '_')
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a JSON-serializable dict."""
        data = asdict(self)
        data.pop('close_sampler', None)
        data['epigenetic_markers'] = list(self.epigenetic_markers)
        data['close_parens_probabilities'] = list(self.close_parens_probabilities)
        return data


@dataclass
class PlushGenConfig:
    """Main configuration for PlushGen."""
    genome: GenomeConfig = None
    max_points: int = DEFAULT_MAX_POINTS
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.genome is None:
            self.genome = GenomeConfig()
        if self.max_points < 1:
            raise InvalidArgument(f"max_points must be at least 1, got {self.max_points}")


# Global configuration instance
_config: Optional[PlushGenConfig] = None


def get_config() -> PlushGenConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PlushGenConfig()
    return _config


def set_config(config: PlushGenConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def setup_logging(level: str = "INFO") -> None:
    """Setup logging for PlushGen."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
