"""
This module defines the permutation tree and its lookups.

Every root-to-leaf path of a tree built over N symbols spells one
permutation, and children are ordered by the sorted order of the
symbols still available, so a depth-first walk visits permutations
in lexicographic order.
"""

import dataclasses
import logging
import numbers
from typing import Any, Generator, List, Optional, Sequence, Tuple

from permtree import combinatorics

Permutation = Tuple[Any, ...]


class _RootSymbol:
    """
    Placeholder value held by the root, which places no symbol.
    """

    def __repr__(self) -> str:
        return "ROOT"


ROOT = _RootSymbol()


@dataclasses.dataclass(frozen=True)
class Node:
    value: Any
    children: Tuple["Node", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


def _build_children(remaining: Permutation) -> Tuple[Node, ...]:
    # one child per available symbol, each owning the pool without it
    return tuple(
        Node(
            value=symbol,
            children=_build_children(remaining[:idx] + remaining[idx + 1 :]),
        )
        for idx, symbol in enumerate(remaining)
    )


class PermutationTree:
    """
    An immutable tree holding every permutation of a set of distinct symbols.

    An empty input produces a tree without a root, holding no permutations.
    """

    def __init__(self, symbols: Sequence[Any]):
        """
        Args:
            symbols: distinct, mutually comparable values.
        Raises:
            ValueError: if symbols repeat or there are more than
                `combinatorics.MAX_SYMBOLS` of them.
        """
        ordered = tuple(sorted(symbols))
        if len(ordered) > combinatorics.MAX_SYMBOLS:
            raise ValueError(
                f"At most {combinatorics.MAX_SYMBOLS} symbols are supported, got {len(ordered)}"
            )
        for previous, current in zip(ordered, ordered[1:]):
            if previous == current:
                raise ValueError(f"Symbols must be distinct, {current!r} repeats")

        self._symbols = ordered
        self._root: Optional[Node] = None
        self._total_permutations = 0
        if ordered:
            self._root = Node(value=ROOT, children=_build_children(ordered))
            self._total_permutations = combinatorics.factorial(len(ordered))
        logging.debug(
            "Built tree over %d symbols with %d permutations",
            len(ordered),
            self._total_permutations,
        )

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def symbols(self) -> Permutation:
        """
        The input symbols, sorted.
        """
        return self._symbols

    @property
    def size(self) -> int:
        """
        The number of symbols, which is also the depth of every leaf.
        """
        return len(self._symbols)

    @property
    def total_permutations(self) -> int:
        """
        N! for N symbols, 0 for an empty tree.
        """
        return self._total_permutations

    @property
    def node_count(self) -> int:
        """
        Number of nodes holding a symbol, i.e. excluding the root.
        """
        if self._root is None:
            return 0
        count = 0
        stack = list(self._root.children)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def __len__(self) -> int:
        return self._total_permutations

    def __repr__(self) -> str:
        return f"{type(self).__name__}(symbols={self._symbols!r})"

    def iter_permutations(self) -> Generator[Permutation, None, None]:
        """
        Yields every permutation in lexicographic order.
        """
        if self._root is None:
            return
        path: List[Any] = []
        for child in self._root.children:
            yield from _iter_leaves(child, path)

    def all_permutations(self) -> List[Permutation]:
        """
        Collects every permutation in lexicographic order.
        An empty tree has no permutations.
        """
        return list(self.iter_permutations())

    def permutation_by_traversal(self, rank: int) -> Permutation:
        """
        Finds the permutation at `rank` by walking the leaves in order
        and counting them. Costs O(rank * N).

        Args:
            rank: 1-based position in lexicographic order.
        Returns:
            The permutation, or an empty tuple if `rank` is out of range.
        """
        if self._root is None or not self._is_valid_rank(rank):
            return ()
        counter = 0

        def visit(node: Node, path: List[Any]) -> Optional[Permutation]:
            nonlocal counter
            path.append(node.value)
            try:
                if node.is_leaf:
                    counter += 1
                    return tuple(path) if counter == rank else None
                for child in node.children:
                    found = visit(child, path)
                    if found is not None:
                        return found
                return None
            finally:
                path.pop()

        path: List[Any] = []
        for child in self._root.children:
            found = visit(child, path)
            if found is not None:
                return found
        return ()

    def permutation_by_factorial(self, rank: int) -> Permutation:
        """
        Computes the permutation at `rank` from its factorial number
        system digits, without walking below the root. Costs O(N^2).

        Args:
            rank: 1-based position in lexicographic order.
        Returns:
            The permutation, or an empty tuple if `rank` is out of range.
        """
        if self._root is None or not self._is_valid_rank(rank):
            return ()
        available = [child.value for child in self._root.children]
        digits = combinatorics.integer_to_factoradic(
            length=len(available), index=int(rank) - 1
        )
        return tuple(available.pop(digit) for digit in digits)

    def rank_of(self, permutation: Sequence[Any]) -> int:
        """
        Inverse of the lookups.

        Returns:
            The 1-based rank of `permutation`, or 0 if it isn't
            a permutation of this tree's symbols.
        """
        if self._root is None:
            return 0
        try:
            digits = combinatorics.lehmer_code(self._symbols, tuple(permutation))
        except ValueError:
            return 0
        return combinatorics.factoradic_to_integer(digits) + 1

    def _is_valid_rank(self, rank: Any) -> bool:
        if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
            return False
        return 1 <= rank <= self._total_permutations


def _iter_leaves(node: Node, path: List[Any]) -> Generator[Permutation, None, None]:
    path.append(node.value)
    try:
        if node.is_leaf:
            yield tuple(path)
        else:
            for child in node.children:
                yield from _iter_leaves(child, path)
    finally:
        path.pop()


def build(symbols: Sequence[Any]) -> PermutationTree:
    """
    Builds a permutation tree over `symbols`.
    """
    return PermutationTree(symbols)


def total_permutations(tree: PermutationTree) -> int:
    return tree.total_permutations


def all_permutations(tree: PermutationTree) -> List[Permutation]:
    return tree.all_permutations()


def iter_permutations(tree: PermutationTree) -> Generator[Permutation, None, None]:
    return tree.iter_permutations()


def permutation_by_traversal(tree: PermutationTree, rank: int) -> Permutation:
    return tree.permutation_by_traversal(rank)


def permutation_by_factorial(tree: PermutationTree, rank: int) -> Permutation:
    return tree.permutation_by_factorial(rank)


def rank_of(tree: PermutationTree, permutation: Sequence[Any]) -> int:
    return tree.rank_of(permutation)
