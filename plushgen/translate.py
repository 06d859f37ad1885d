"""
PlushGen Translation

Reference program assembler that expands a flat Plush genome into a nested
Push program. Programs are nested Python lists; the outer list is the
program itself.

Instructions that take code blocks declare how many they open through a
paren-group lookup. Each block stays open until enough close markers have
been seen; closes with no open block are ignored, and blocks still open at
the end of the genome are closed there.
"""

import logging
from collections.abc import Hashable
from typing import Any, Callable, List, Mapping, Optional, Union

from .config import CLOSE, SILENT, GenomeConfig
from .errors import InvalidArgument
from .genome import INSTRUCTION, Genome

logger = logging.getLogger(__name__)

# Paren stack tokens
_CLOSE = "close"
_CLOSE_OPEN = "close-open"

ParenGroups = Union[Mapping[Any, int], Callable[[Any], int]]


class PlushTranslator:
    """
    Translates Plush genomes into Push programs.

    Args:
        paren_groups: Mapping or function giving the number of code blocks
            each instruction opens. Atoms not listed open none.
    """

    def __init__(self, paren_groups: Optional[ParenGroups] = None):
        self.paren_groups = paren_groups if paren_groups is not None else {}

    def groups_for(self, atom: Any) -> int:
        if callable(self.paren_groups):
            n = self.paren_groups(atom)
        elif isinstance(atom, Hashable):
            n = self.paren_groups.get(atom, 0)
        else:
            n = 0
        if n < 0:
            raise InvalidArgument(f"Paren group count for {atom!r} must be non-negative, got {n}")
        return n

    def translate(self, genome: Genome) -> List[Any]:
        """
        Expand genome into a nested program.

        Silent entries contribute no instruction but their closes still apply.

        Returns:
            The program as a nested list
        """
        program = []
        blocks = [program]
        paren_stack = []

        def close_blocks(count):
            for _ in range(count):
                if not paren_stack:
                    break
                token = paren_stack.pop()
                blocks.pop()
                if token == _CLOSE_OPEN:
                    block = []
                    blocks[-1].append(block)
                    blocks.append(block)

        for entry in genome:
            if not entry.get(SILENT, False):
                atom = entry[INSTRUCTION]
                blocks[-1].append(atom)
                n = self.groups_for(atom)
                if n > 0:
                    block = []
                    blocks[-1].append(block)
                    blocks.append(block)
                    paren_stack.append(_CLOSE)
                    paren_stack.extend([_CLOSE_OPEN] * (n - 1))
            close_blocks(entry.get(CLOSE, 0))

        close_blocks(len(paren_stack))
        logger.debug(f"Translated genome of {len(genome)} entries into {count_points(program)} points")
        return program

    def __call__(self, genome: Genome, config: Optional[GenomeConfig] = None) -> List[Any]:
        # config is part of the assembler call signature; translation does not depend on it
        return self.translate(genome)


def translate_plush_genome_to_push_program(genome: Genome,
                                           config: Optional[GenomeConfig] = None,
                                           paren_groups: Optional[ParenGroups] = None) -> List[Any]:
    """Translate genome with a one-off PlushTranslator."""
    return PlushTranslator(paren_groups)(genome, config)


def count_points(program: Any) -> int:
    """Count points in a program: every atom and every list is one point."""
    if isinstance(program, list):
        return 1 + sum(count_points(item) for item in program)
    return 1


def pretty_print_program(program: Any) -> str:
    """
    Render a program in Push syntax.

    Args:
        program: Nested list program or a single atom

    Returns:
        A string such as "(1 exec_if (a) (b))"
    """
    if isinstance(program, list):
        return "(" + " ".join(pretty_print_program(item) for item in program) + ")"
    if isinstance(program, bool):
        return 'true' if program else 'false'
    return str(program)
