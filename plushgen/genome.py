"""
PlushGen Genome Generator

This module builds random Plush genomes: flat sequences of instruction
entries, each carrying one atom plus any requested epigenetic markers.
"""

import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .config import CLOSE, SILENT, GenomeConfig
from .errors import InvalidArgument, MalformedGenerator, check_integer
from .random_source import RandomSource, resolve_random_source

logger = logging.getLogger(__name__)

INSTRUCTION = "instruction"
UUID = "uuid"
RANDOM_INSERTION = "random_insertion"

# An atom generator is a literal atom, a zero-argument callable producing one,
# or a callable producing such a callable.
AtomGenerator = Union[Any, Callable[[], Any]]
InstructionEntry = Dict[str, Any]
Genome = List[InstructionEntry]

# Number of calls allowed while resolving an atom generator
MAX_GENERATOR_DEPTH = 2


def resolve_atom(element: AtomGenerator, max_depth: int = MAX_GENERATOR_DEPTH) -> Any:
    """
    Resolve an atom generator to a concrete atom.

    Args:
        element: A literal atom or a zero-argument callable
        max_depth: Maximum number of calls before giving up

    Returns:
        The first non-callable value reached

    Raises:
        MalformedGenerator: If element is still callable after max_depth calls
    """
    value = element
    for _ in range(max_depth):
        if not callable(value):
            return value
        value = value()
    if callable(value):
        raise MalformedGenerator(f"Atom generator {element!r} did not resolve to an atom "
                                 f"within {max_depth} calls")
    return value


def random_instruction_entry(atom_generators: Sequence[AtomGenerator],
                             config: Optional[GenomeConfig] = None,
                             random_insertion: Optional[bool] = None,
                             rng: Optional[RandomSource] = None) -> InstructionEntry:
    """
    Return a random instruction entry.

    Keys are the configured epigenetic markers in order, then "instruction"
    and "uuid", then "random_insertion" when requested.

    Args:
        atom_generators: Non-empty pool of atoms and atom generators
        config: Generation settings, defaults to GenomeConfig()
        random_insertion: Overrides config.random_insertion when given
        rng: Random source, defaults to the context source

    Returns:
        Dict mapping marker names to values
    """
    if config is None:
        config = GenomeConfig()
    if random_insertion is None:
        random_insertion = config.random_insertion
    rng = resolve_random_source(rng)

    entry = {}
    for marker in config.epigenetic_markers:
        if marker == CLOSE:
            entry[CLOSE] = config.close_sampler.sample(rng)
        elif marker == SILENT:
            entry[SILENT] = rng.uniform_float() < config.silent_instruction_probability
    entry[INSTRUCTION] = resolve_atom(rng.choice(atom_generators))
    entry[UUID] = uuid.uuid4()
    if random_insertion:
        entry[RANDOM_INSERTION] = True
    return entry


def random_genome_with_size(genome_size: int,
                            atom_generators: Sequence[AtomGenerator],
                            config: Optional[GenomeConfig] = None,
                            random_insertion: Optional[bool] = None,
                            rng: Optional[RandomSource] = None) -> Genome:
    """Return a random Plush genome containing exactly genome_size entries."""
    genome_size = check_integer(genome_size, "genome_size")
    if genome_size < 0:
        raise InvalidArgument(f"genome_size must be non-negative, got {genome_size}")
    if config is None:
        config = GenomeConfig()
    rng = resolve_random_source(rng)
    genome = [random_instruction_entry(atom_generators, config, random_insertion, rng)
              for _ in range(genome_size)]
    logger.debug(f"Generated genome with {genome_size} entries")
    return genome


def random_genome(max_genome_size: int,
                  atom_generators: Sequence[AtomGenerator],
                  config: Optional[GenomeConfig] = None,
                  random_insertion: Optional[bool] = None,
                  rng: Optional[RandomSource] = None) -> Genome:
    """Return a random Plush genome with between 1 and max_genome_size entries."""
    max_genome_size = check_integer(max_genome_size, "max_genome_size")
    if max_genome_size < 1:
        raise InvalidArgument(f"max_genome_size must be at least 1, got {max_genome_size}")
    rng = resolve_random_source(rng)
    size = 1 + rng.uniform_int(max_genome_size)
    return random_genome_with_size(size, atom_generators, config, random_insertion, rng)


def generate_genome(atom_generators: Sequence[AtomGenerator],
                    config: Optional[GenomeConfig] = None,
                    rng: Optional[RandomSource] = None) -> Genome:
    """
    Generate a genome using the size settings in config.

    Uses config.genome_size when it is set, otherwise draws a size bounded
    by config.max_genome_size.
    """
    if config is None:
        config = GenomeConfig()
    if config.genome_size is not None:
        return random_genome_with_size(config.genome_size, atom_generators, config, rng=rng)
    return random_genome(config.max_genome_size, atom_generators, config, rng=rng)
