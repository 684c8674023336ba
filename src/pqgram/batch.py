"""Loading trees from files for batch comparisons."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from .schema import validate_tree_dict
from .tree import TreeNode, tree_depth, tree_size

logger = logging.getLogger(__name__)


def load_tree(path: Path) -> TreeNode:
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix != ".json":
        raise ValueError(f"Unsupported tree file format: {path.suffix}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to decode JSON from {path}: {exc}") from exc
    validate_tree_dict(data)
    return TreeNode.from_dict(data)


def load_trees(paths: Iterable[Path]) -> List[TreeNode]:
    paths = list(paths)
    trees: List[TreeNode] = []
    for index, path in enumerate(paths, start=1):
        loaded = load_tree(path)
        logger.info(
            "[%s/%s] Loaded %s (%s nodes, depth %s)", index, len(paths), path, tree_size(loaded), tree_depth(loaded)
        )
        trees.append(loaded)
    return trees
