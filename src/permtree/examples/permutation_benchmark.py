"""
Times full enumeration against both rank lookups,
for trees over the symbols '1'..'n'.
"""

import argparse
import dataclasses
import logging
import os.path
from typing import List, Optional

import numpy as np

from permtree import core, export, runtime, tracking

ALL_PERMUTATIONS = "all_permutations"
BY_TRAVERSAL = "by_traversal"
BY_FACTORIAL = "by_factorial"
METHODS = (ALL_PERMUTATIONS, BY_TRAVERSAL, BY_FACTORIAL)


@dataclasses.dataclass(frozen=True)
class Args:
    run_id: str
    output_dir: str
    max_size: int
    num_samples: int
    seed: Optional[int]


def parse_args() -> Args:
    arg_parser = argparse.ArgumentParser(prog="Permutation Tree - Lookup Benchmark")
    arg_parser.add_argument("--run-id", type=str, default=runtime.run_id())
    arg_parser.add_argument("--output-dir", type=str, required=True)
    arg_parser.add_argument("--max-size", type=int, default=8)
    arg_parser.add_argument("--num-samples", type=int, default=3)
    arg_parser.add_argument("--seed", type=int, default=None)
    args, _ = arg_parser.parse_known_args()
    return Args(**vars(args))


def symbols(size: int) -> List[str]:
    return [str(digit) for digit in range(1, size + 1)]


def time_tree(
    tree: core.PermutationTree, ranks: np.ndarray
) -> tracking.TimingStats:
    """
    Times one full enumeration, and each lookup once per rank.
    """
    stats = tracking.TimingStats()
    timer = runtime.Timer()
    with timer:
        tree.all_permutations()
    stats.add(ALL_PERMUTATIONS, timer.elapsed_us)

    for rank in ranks:
        with timer:
            tree.permutation_by_traversal(rank)
        stats.add(BY_TRAVERSAL, timer.elapsed_us)

    for rank in ranks:
        with timer:
            tree.permutation_by_factorial(rank)
        stats.add(BY_FACTORIAL, timer.elapsed_us)
    return stats


def main(args: Args):
    rng = np.random.default_rng(args.seed)
    output_dir = os.path.join(args.output_dir, args.run_id)
    records = []
    with tracking.ExperimentLogger(
        output_dir,
        name="permtree/benchmark",
        params={
            "max_size": args.max_size,
            "num_samples": args.num_samples,
            "seed": args.seed if args.seed is not None else "",
        },
    ) as exp_logger:
        for size in range(1, args.max_size + 1):
            tree = core.build(symbols(size))
            ranks = rng.integers(
                1, tree.total_permutations, size=args.num_samples, endpoint=True
            )
            stats = time_tree(tree, ranks=ranks)
            logging.info("Task %s, n=%d: %s", args.run_id, size, stats)
            exp_logger.log(
                size=size,
                total_permutations=tree.total_permutations,
                timings=stats.as_dict(),
                metadata={"ranks": ranks.tolist()},
            )
            records.append(export.TimingRecord(size=size, timings=stats.as_dict()))

    export.export_timings(output_dir, methods=METHODS, records=records)


if __name__ == "__main__":
    main(args=parse_args())
