#!/usr/bin/env python3
"""Command-line interface for PlushGen."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import GenomeConfig, setup_logging
from .errors import PlushGenError
from .genome import UUID, generate_genome
from .programs import random_push_code
from .random_source import RandomSource
from .stats import summarize_genomes
from .translate import PlushTranslator, count_points, pretty_print_program

logger = logging.getLogger(__name__)


def _build_config(args) -> GenomeConfig:
    data: Dict[str, Any] = {}
    if args.config:
        data.update(json.loads(Path(args.config).read_text()))
    if args.markers is not None:
        data['epigenetic_markers'] = [m for m in args.markers.split(',') if m]
    if args.close_probs is not None:
        data['close_parens_probabilities'] = [float(p) for p in args.close_probs.split(',') if p]
    if args.silent_prob is not None:
        data['silent_instruction_probability'] = args.silent_prob
    if args.max_genome_size is not None:
        data['max_genome_size'] = args.max_genome_size
    if args.genome_size is not None:
        data['genome_size'] = args.genome_size
    if args.random_insertion:
        data['random_insertion'] = True
    return GenomeConfig.from_dict(data)


def _sample_genomes(args, config: GenomeConfig, atoms: List[str]) -> List[List[Dict[str, Any]]]:
    rng = RandomSource(args.seed)
    return [generate_genome(atoms, config, rng) for _ in range(args.count)]


def _without_uuids(genomes):
    return [[{k: v for k, v in entry.items() if k != UUID} for entry in genome] for genome in genomes]


def _run_determinism_check(args, config: GenomeConfig, atoms: List[str]) -> int:
    first = _sample_genomes(args, config, atoms)
    second = _sample_genomes(args, config, atoms)
    if _without_uuids(first) == _without_uuids(second):
        print(f"PASS: seed {args.seed} reproduced {args.count} genome(s)")
        return 0
    print(f"FAIL: seed {args.seed} produced different genomes")
    return 1


def sample_main(argv=None) -> int:
    """Main entry point for plushgen-sample command."""
    parser = argparse.ArgumentParser(description="Sample random Plush genomes")
    parser.add_argument(
        "--atoms", required=True, help="Comma-separated atom pool (e.g. integer_add,exec_if,1)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of genomes")
    parser.add_argument("--config", help="JSON file with genome settings")
    parser.add_argument("--markers", help="Comma-separated epigenetic markers (close,silent)")
    parser.add_argument("--close-probs", help="Comma-separated close-count probabilities")
    parser.add_argument("--silent-prob", type=float, help="Silent instruction probability")
    parser.add_argument("--max-genome-size", type=int, help="Maximum genome size")
    parser.add_argument("--genome-size", type=int, help="Exact genome size")
    parser.add_argument("--random-insertion", action="store_true", help="Add the random_insertion marker")
    parser.add_argument(
        "--program",
        action="store_true",
        help="Print translated Push programs instead of genomes",
    )
    parser.add_argument("--max-points", type=int, help="Program size budget (with --program)")
    parser.add_argument("--paren-groups", help="JSON object mapping instructions to block counts")
    parser.add_argument("--summary", action="store_true", help="Print genome statistics")
    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Run determinism check (same seed twice)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    atoms = [a for a in args.atoms.split(',') if a]
    try:
        config = _build_config(args)

        if args.determinism_check:
            return _run_determinism_check(args, config, atoms)

        if args.program:
            paren_groups = json.loads(args.paren_groups) if args.paren_groups else None
            translator = PlushTranslator(paren_groups)
            rng = RandomSource(args.seed)
            for _ in range(args.count):
                program = random_push_code(atoms, args.max_points, config, translator, rng)
                print(f"{count_points(program):4d} {pretty_print_program(program)}")
            return 0

        genomes = _sample_genomes(args, config, atoms)
    except (PlushGenError, ValueError, OSError) as e:
        # Bad settings or unreadable --config input
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Sampled {len(genomes)} genome(s) with seed {args.seed}")
    if args.summary:
        print(json.dumps(summarize_genomes(genomes), indent=2))
    else:
        print(json.dumps(genomes, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(sample_main())
