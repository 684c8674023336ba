"""Fixed-length shift registers of node labels."""

from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Tuple, Union

from .validation import require_positive_integer


class Absent(enum.Enum):
    """Placeholder label for ancestors or siblings that do not exist."""

    ABSENT = "*"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT

Label = Union[str, Absent]
ComparableForm = Tuple[Optional[str], ...]


@dataclasses.dataclass(frozen=True)
class Register:
    """Immutable register holding a fixed number of labels.

    ``shift`` and ``concat`` always return new registers; the receiver is never altered.
    Equality and hashing are structural, so two registers with the same label sequence
    are interchangeable as multiset keys.
    """

    contents: Tuple[Label, ...]

    def __post_init__(self) -> None:
        if not self.contents:
            raise ValueError("A register needs at least one label")

    @classmethod
    def of_length(cls, n: int) -> "Register":
        """Create a register of ``n`` absent labels."""
        require_positive_integer(n=n)
        return cls((ABSENT,) * n)

    @classmethod
    def of(cls, *labels: Optional[str]) -> "Register":
        """Create a register from explicit labels, ``None`` standing for ``ABSENT``."""
        return cls(tuple(ABSENT if label is None else label for label in labels))

    def __len__(self) -> int:
        return len(self.contents)

    def shift(self, label: Label = ABSENT) -> "Register":
        """Drop the oldest label and append ``label`` at the end."""
        return Register(self.contents[1:] + (label,))

    def concat(self, other: "Register") -> "Register":
        return Register(self.contents + other.contents)

    def to_comparable(self) -> ComparableForm:
        """Return the labels as a tuple with ``None`` in place of ``ABSENT``."""
        return tuple(None if label is ABSENT else label for label in self.contents)

    def __str__(self) -> str:
        return "(" + ", ".join("*" if label is ABSENT else repr(label) for label in self.contents) + ")"
