"""
Prints every permutation of a set of symbols,
and checks both lookups agree for each rank.
"""

import argparse
import dataclasses
import logging
from typing import Sequence

from permtree import core


@dataclasses.dataclass(frozen=True)
class Args:
    symbols: Sequence[str]


def parse_args() -> Args:
    arg_parser = argparse.ArgumentParser(prog="Permutation Tree - Print Example")
    arg_parser.add_argument("symbols", nargs="*", default=["1", "2", "3"])
    args, _ = arg_parser.parse_known_args()
    return Args(**vars(args))


def as_text(permutation: Sequence[str]) -> str:
    return "".join(permutation)


def main(args: Args):
    tree = core.build(args.symbols)
    permutations = core.all_permutations(tree)
    logging.info(
        "All %d permutations of [%s]: %s",
        core.total_permutations(tree),
        " ".join(args.symbols),
        " ".join(as_text(permutation) for permutation in permutations),
    )

    for rank in range(1, core.total_permutations(tree) + 1):
        by_traversal = core.permutation_by_traversal(tree, rank)
        by_factorial = core.permutation_by_factorial(tree, rank)
        if by_traversal != by_factorial:
            logging.error(
                "Permutation #%d differs: %s != %s",
                rank,
                as_text(by_traversal),
                as_text(by_factorial),
            )
        else:
            logging.info("Permutation #%d: %s", rank, as_text(by_traversal))


if __name__ == "__main__":
    main(args=parse_args())
