"""Comparison utilities that compute both pq-gram distances between two trees."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict

from .distance import DEFAULT_P, DEFAULT_Q, DEFAULT_W, PQOptions, PQWindowedOptions
from .profile import PQGramProfile


@dataclasses.dataclass
class ComparisonMetrics:
    pq_distance: float
    windowed_distance: float
    reference_profile_length: int
    candidate_profile_length: int
    pq_intersection: int
    windowed_intersection: int

    def flat(self) -> Dict[str, float]:
        return dataclasses.asdict(self)


@dataclasses.dataclass
class ComparisonResult:
    reference_tree: Any
    compared_tree: Any
    options: PQOptions
    windowed_options: PQWindowedOptions
    metrics: ComparisonMetrics


def compute_comparison(
    reference_tree: Any,
    compared_tree: Any,
    *,
    p: int = DEFAULT_P,
    q: int = DEFAULT_Q,
    w: int = DEFAULT_W,
) -> ComparisonResult:
    options = PQOptions(p=p, q=q)
    windowed_options = PQWindowedOptions(p=p, w=w)
    options.validate()
    windowed_options.validate()

    ref_profile = PQGramProfile.of(reference_tree, p, q)
    cand_profile = PQGramProfile.of(compared_tree, p, q)
    ref_windowed = PQGramProfile.windowed(reference_tree, p, w)
    cand_windowed = PQGramProfile.windowed(compared_tree, p, w)

    metrics = ComparisonMetrics(
        pq_distance=ref_profile.distance_to(cand_profile),
        windowed_distance=ref_windowed.distance_to(cand_windowed),
        reference_profile_length=len(ref_profile),
        candidate_profile_length=len(cand_profile),
        pq_intersection=ref_profile.intersect(cand_profile),
        windowed_intersection=ref_windowed.intersect(cand_windowed),
    )
    return ComparisonResult(
        reference_tree=reference_tree,
        compared_tree=compared_tree,
        options=options,
        windowed_options=windowed_options,
        metrics=metrics,
    )
