"""
PlushGen: random Plush genome generation for Push genetic programming.

This package produces random, well-formed Plush genomes (flat sequences of
instruction entries with epigenetic markers) under configurable probability
distributions, and expands them into Push programs for seeding a population.
"""

from .errors import PlushGenError, InvalidArgument, MalformedGenerator
from .random_source import RandomSource, get_random_source, set_random_source, using_random_source
from .closes import CloseCountSampler, random_closes, DEFAULT_CLOSE_PARENS_PROBABILITIES
from .config import GenomeConfig, PlushGenConfig, get_config, set_config
from .genome import resolve_atom, random_instruction_entry, random_genome_with_size, random_genome, generate_genome
from .translate import PlushTranslator, translate_plush_genome_to_push_program, count_points, pretty_print_program
from .programs import random_push_code

__version__ = "0.1.0"
__all__ = [
    "PlushGenError", "InvalidArgument", "MalformedGenerator",
    "RandomSource", "get_random_source", "set_random_source", "using_random_source",
    "CloseCountSampler", "random_closes", "DEFAULT_CLOSE_PARENS_PROBABILITIES",
    "GenomeConfig", "PlushGenConfig", "get_config", "set_config",
    "resolve_atom", "random_instruction_entry", "random_genome_with_size", "random_genome", "generate_genome",
    "PlushTranslator", "translate_plush_genome_to_push_program", "count_points", "pretty_print_program",
    "random_push_code",
]
