"""Reporting helpers: pairwise distance matrices, CSV and JSON export."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd

from .distance import DEFAULT_P, DEFAULT_Q, DEFAULT_W
from .profile import PQGramProfile
from .validation import require_positive_integer, require_window_size

logger = logging.getLogger(__name__)


def build_profiles(
    trees: Sequence[Any],
    *,
    windowed: bool = False,
    p: int = DEFAULT_P,
    q: int = DEFAULT_Q,
    w: int = DEFAULT_W,
) -> List[PQGramProfile]:
    require_positive_integer(p=p)
    if windowed:
        require_window_size(w)
        return [PQGramProfile.windowed(t, p, w) for t in trees]
    require_positive_integer(q=q)
    return [PQGramProfile.of(t, p, q) for t in trees]


def distance_matrix(
    trees: Sequence[Any],
    names: Optional[Sequence[str]] = None,
    *,
    windowed: bool = False,
    p: int = DEFAULT_P,
    q: int = DEFAULT_Q,
    w: int = DEFAULT_W,
) -> pd.DataFrame:
    """Symmetric matrix of pairwise distances; each tree's profile is built once."""

    if names is None:
        names = [str(index) for index in range(len(trees))]
    if len(names) != len(trees):
        raise ValueError(f"Expected {len(trees)} names, got {len(names)}")

    profiles = build_profiles(trees, windowed=windowed, p=p, q=q, w=w)
    frame = pd.DataFrame(0.0, index=list(names), columns=list(names))
    total = len(profiles) * (len(profiles) - 1) // 2
    done = 0
    for i, left in enumerate(profiles):
        for j in range(i + 1, len(profiles)):
            distance = left.distance_to(profiles[j])
            frame.iat[i, j] = distance
            frame.iat[j, i] = distance
            done += 1
        if total:
            logger.info("[%s/%s] Compared %s", done, total, names[i])
    return frame


def matrix_to_records(frame: pd.DataFrame) -> List[dict]:
    """Upper-triangle pairs of a distance matrix as flat records."""
    labels = list(frame.index)
    records = []
    for i, left in enumerate(labels):
        for j in range(i + 1, len(labels)):
            records.append({"reference": left, "candidate": labels[j], "distance": float(frame.iat[i, j])})
    return records


def export_csv(frame: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path)
    return path


def export_json(frame: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(matrix_to_records(frame), indent=2, ensure_ascii=False), encoding="utf-8")
    return path
