"""pq-gram distances between two trees."""

from __future__ import annotations

import dataclasses
from typing import Any, Optional

from .profile import PQGramProfile
from .validation import require_positive_integer, require_window_size

DEFAULT_P = 2
DEFAULT_Q = 3
DEFAULT_W = 3


@dataclasses.dataclass(frozen=True)
class PQOptions:
    p: int = DEFAULT_P
    q: int = DEFAULT_Q

    def validate(self) -> None:
        require_positive_integer(p=self.p, q=self.q)


@dataclasses.dataclass(frozen=True)
class PQWindowedOptions:
    p: int = DEFAULT_P
    w: int = DEFAULT_W

    def validate(self) -> None:
        require_positive_integer(p=self.p)
        require_window_size(self.w)


def _resolve(options: Any, defaults: Any, **overrides: Optional[int]) -> Any:
    base = options if options is not None else defaults
    changes = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(base, **changes) if changes else base


def pq_distance(
    t1: Any,
    t2: Any,
    options: Optional[PQOptions] = None,
    *,
    p: Optional[int] = None,
    q: Optional[int] = None,
) -> float:
    """Compute the pq-gram distance of two ordered trees (p=2, q=3 by default).

    ``p`` and ``q`` given as keywords override the matching field of ``options``.
    Invalid values are rejected before either tree is traversed.
    """

    opts = _resolve(options, PQOptions(), p=p, q=q)
    opts.validate()
    profile1 = PQGramProfile.of(t1, opts.p, opts.q)
    profile2 = PQGramProfile.of(t2, opts.p, opts.q)
    return profile1.distance_to(profile2)


def pq_distance_windowed(
    t1: Any,
    t2: Any,
    options: Optional[PQWindowedOptions] = None,
    *,
    p: Optional[int] = None,
    w: Optional[int] = None,
) -> float:
    """Order-invariant variant of :func:`pq_distance` (p=2, w=3 by default).

    Trees that differ only in the order of siblings are at distance 0.
    """

    opts = _resolve(options, PQWindowedOptions(), p=p, w=w)
    opts.validate()
    profile1 = PQGramProfile.windowed(t1, opts.p, opts.w)
    profile2 = PQGramProfile.windowed(t2, opts.p, opts.w)
    return profile1.distance_to(profile2)
