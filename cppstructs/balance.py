"""Experiments measuring how balanced randomly built search trees are."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

from cppstructs.bintree import BinarySearchTree

DEFAULT_SEED = 0o20416
DEFAULT_COUNT = 9000
DEFAULT_TRIALS = 800


@dataclass(frozen=True)
class HeightStats:
    """Summary of tree heights over a number of trials."""

    average_max_height: float
    highest_max_height: int
    average_min_height: float
    lowest_min_height: int
    average_difference: float
    greatest_difference: int
    lowest_difference: int

    def report(self) -> str:
        def fmt(value: float) -> str:
            return f"{value:.2g}"

        return "\n".join(
            [
                f"Average maximum height: {fmt(self.average_max_height)}",
                f"Highest maximum height: {self.highest_max_height}",
                f"Average minimum height: {fmt(self.average_min_height)}",
                f"Lowest minimum height: {self.lowest_min_height}",
                f"Average height difference: {fmt(self.average_difference)}",
                f"Greatest height difference: {self.greatest_difference}",
                f"Lowest height difference: {self.lowest_difference}",
            ]
        )


def summarize(max_heights: Sequence[int], min_heights: Sequence[int]) -> HeightStats:
    """Summarise paired maximum and minimum heights from each trial."""
    if not max_heights or len(max_heights) != len(min_heights):
        raise ValueError("height sequences must be non-empty and of equal length")
    differences = [abs(hi - lo) for hi, lo in zip(max_heights, min_heights)]
    trials = len(max_heights)
    return HeightStats(
        average_max_height=sum(max_heights) / trials,
        highest_max_height=max(max_heights),
        average_min_height=sum(min_heights) / trials,
        lowest_min_height=min(min_heights),
        average_difference=sum(differences) / trials,
        greatest_difference=max(differences),
        lowest_difference=min(differences),
    )


def _next_permutation(values: MutableSequence[int]) -> bool:
    """Rearrange into the next lexicographic permutation; wrap to sorted at the end."""
    pivot = len(values) - 2
    while pivot >= 0 and values[pivot] >= values[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        values.reverse()
        return False
    swap = len(values) - 1
    while values[swap] <= values[pivot]:
        swap -= 1
    values[pivot], values[swap] = values[swap], values[pivot]
    values[pivot + 1 :] = reversed(values[pivot + 1 :])
    return True


def _heights(keys: Sequence[int]) -> tuple[int, int]:
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, key)
    return tree.max_height(), tree.min_height()


def basic_experiment(
    seed: int = DEFAULT_SEED,
    count: int = DEFAULT_COUNT,
    trials: int = DEFAULT_TRIALS,
) -> HeightStats:
    """Build trees from successive permutations of one shuffled key sequence."""
    keys = list(range(1, count + 1))
    random.Random(seed).shuffle(keys)
    max_heights, min_heights = [], []
    for _ in range(trials):
        high, low = _heights(keys)
        max_heights.append(high)
        min_heights.append(low)
        _next_permutation(keys)
    return summarize(max_heights, min_heights)


def improved_experiment(
    seed: int = DEFAULT_SEED,
    max_size: int = DEFAULT_COUNT,
    trials: int = DEFAULT_TRIALS,
) -> HeightStats:
    """Build trees of random sizes below ``max_size`` from shuffled keys."""
    sizes = random.Random(seed)
    max_heights, min_heights = [], []
    for _ in range(trials):
        keys = list(range(1, sizes.randrange(max_size) + 1))
        random.Random(seed).shuffle(keys)
        high, low = _heights(keys)
        max_heights.append(high)
        min_heights.append(low)
    return summarize(max_heights, min_heights)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Measure random search tree heights.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    args = parser.parse_args(argv)
    if args.count < 1 or args.trials < 1:
        parser.error("count and trials must be positive")

    print("Basic test")
    print(basic_experiment(args.seed, args.count, args.trials).report())
    print()
    print("Improved test")
    print(improved_experiment(args.seed, args.count, args.trials).report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())