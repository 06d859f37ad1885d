"""
PlushGen Random Programs

Top-level entry point that produces a random Push program within an
approximate size budget.
"""

import logging
from typing import Any, Callable, Optional, Sequence

from .config import GenomeConfig, get_config
from .genome import AtomGenerator, Genome, random_genome
from .random_source import RandomSource, resolve_random_source
from .translate import PlushTranslator

logger = logging.getLogger(__name__)

# Translated programs have roughly four points per genome entry
POINTS_PER_GENOME_ENTRY = 4

Assembler = Callable[[Genome, GenomeConfig], Any]


def genome_budget(max_points: int) -> int:
    """Return the maximum genome size used for a program of max_points."""
    return max(int(max_points / POINTS_PER_GENOME_ENTRY), 1)


def random_push_code(atom_generators: Sequence[AtomGenerator],
                     max_points: Optional[int] = None,
                     config: Optional[GenomeConfig] = None,
                     assembler: Optional[Assembler] = None,
                     rng: Optional[RandomSource] = None) -> Any:
    """
    Return a random Push program with size limited by max_points.

    Args:
        atom_generators: Pool of atoms and atom generators
        max_points: Approximate size budget, defaults to get_config().max_points
        config: Genome settings, defaults to get_config().genome
        assembler: Callable turning (genome, config) into a program,
            defaults to a PlushTranslator with no block-opening instructions
        rng: Random source, defaults to the context source

    Returns:
        Whatever the assembler produces
    """
    global_config = get_config()
    if max_points is None:
        max_points = global_config.max_points
    if config is None:
        config = global_config.genome
    if assembler is None:
        assembler = PlushTranslator()

    budget = genome_budget(max_points)
    genome = random_genome(budget, atom_generators, config, rng=resolve_random_source(rng))
    logger.debug(f"Assembling program from {len(genome)} entries (budget {budget}, max_points {max_points})")
    return assembler(genome, config)
