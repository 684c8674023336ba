"""pq-gram profiles: bags of registers extracted from a tree."""

from __future__ import annotations

import logging
from collections import Counter, deque
from typing import Any, Deque, Dict, Iterator, List, Tuple

from .register import ABSENT, ComparableForm, Label, Register
from .tree import as_pq_tree
from .validation import IncompatibleArityError, require_positive_integer, require_window_size

logger = logging.getLogger(__name__)


class PQGramProfile:
    """A bag of equally sized registers.

    Registers are counted by their comparable form, so adding two structurally equal
    registers increments a single entry. The bag is append-only.
    """

    def __init__(self, register_length: int):
        require_positive_integer(register_length=register_length)
        self._register_length = register_length
        self._tuples: Counter[ComparableForm] = Counter()
        self._length = 0

    @property
    def register_length(self) -> int:
        return self._register_length

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[ComparableForm]:
        return iter(self._tuples)

    def __contains__(self, register: object) -> bool:
        if not isinstance(register, Register):
            return False
        return register.to_comparable() in self._tuples

    def __repr__(self) -> str:
        return (
            f"PQGramProfile(register_length={self._register_length}, "
            f"length={self._length}, distinct={len(self._tuples)})"
        )

    def counts(self) -> Dict[ComparableForm, int]:
        """Copy of the register -> multiplicity mapping."""
        return dict(self._tuples)

    def add(self, register: Register) -> None:
        if len(register) != self._register_length:
            raise IncompatibleArityError(
                f"Expected register of length {self._register_length}, but got {len(register)}"
            )
        self._tuples[register.to_comparable()] += 1
        self._length += 1

    def intersect(self, other: "PQGramProfile") -> int:
        """Size of the bag intersection with ``other``."""
        if self._register_length != other._register_length:
            raise IncompatibleArityError(
                "Intersected profiles must only contain registers of same length "
                f"({self._register_length} != {other._register_length})"
            )
        smaller, larger = (self._tuples, other._tuples)
        if len(larger) < len(smaller):
            smaller, larger = larger, smaller
        return sum(min(count, larger[key]) for key, count in smaller.items() if key in larger)

    def distance_to(self, other: "PQGramProfile") -> float:
        """Normalised pq-gram distance in ``[0, 1]``; two empty profiles are at distance 0."""
        union = self._length + other._length
        intersection = self.intersect(other)
        if union == 0:
            return 0.0
        return 1.0 - 2.0 * intersection / union

    @classmethod
    def of(cls, tree: Any, p: int, q: int) -> "PQGramProfile":
        """Build the ordered pq-gram profile of ``tree``.

        The tree is walked breadth-first. Each node with ``k`` children contributes
        ``k + q - 1`` registers (the sibling window is drained with absent labels past
        the last child); each leaf contributes one register with an empty sibling window.
        """
        require_positive_integer(p=p, q=q)
        pq_tree = as_pq_tree(tree)
        profile = cls(p + q)
        if pq_tree.root is None:
            return profile

        queue: Deque[Tuple[Any, Register]] = deque([(pq_tree.root, Register.of_length(p))])
        nodes = 0
        while queue:
            current, ancestors = queue.popleft()
            nodes += 1
            ancestors = ancestors.shift(pq_tree.label(current))
            siblings = Register.of_length(q)
            children = pq_tree.children(current)

            if not children:
                profile.add(ancestors.concat(siblings))
                continue

            for child in children:
                siblings = siblings.shift(pq_tree.label(child))
                profile.add(ancestors.concat(siblings))
                queue.append((child, ancestors))

            for _ in range(q - 1):
                siblings = siblings.shift()
                profile.add(ancestors.concat(siblings))

        logger.debug("Built pq-gram profile of %s nodes (p=%s, q=%s): %s registers", nodes, p, q, len(profile))
        return profile

    @classmethod
    def windowed(cls, tree: Any, p: int, w: int) -> "PQGramProfile":
        """Build the order-invariant profile of ``tree`` using sibling windows of width ``w``.

        Each register is the node's ancestor path (length ``p``) followed by a pair of
        sibling labels. Child labels are sorted and, if there are fewer than ``w``,
        padded with absent labels up to ``w``. Every position is then paired with each
        of the ``w - 1`` positions following it, wrapping around the end of the list.
        Leaves contribute a single register with two absent siblings.
        """
        require_positive_integer(p=p)
        require_window_size(w)
        pq_tree = as_pq_tree(tree)
        profile = cls(p + 2)
        if pq_tree.root is None:
            return profile

        queue: Deque[Tuple[Any, Register]] = deque([(pq_tree.root, Register.of_length(p))])
        nodes = 0
        while queue:
            current, ancestors = queue.popleft()
            nodes += 1
            ancestors = ancestors.shift(pq_tree.label(current))
            children = pq_tree.children(current)

            if not children:
                profile.add(ancestors.concat(Register.of_length(2)))
                continue

            for first, second in _window_pairs([pq_tree.label(child) for child in children], w):
                profile.add(ancestors.concat(Register((first, second))))
            for child in children:
                queue.append((child, ancestors))

        logger.debug("Built windowed profile of %s nodes (p=%s, w=%s): %s registers", nodes, p, w, len(profile))
        return profile


def _window_pairs(labels: List[str], w: int) -> Iterator[Tuple[Label, Label]]:
    window: List[Label] = sorted(labels)
    window.extend([ABSENT] * (w - len(window)))
    n = len(window)
    for i in range(n):
        for offset in range(1, w):
            yield window[i], window[(i + offset) % n]
