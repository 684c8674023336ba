"""Tree abstraction consumed by the profile builder, plus a concrete node type."""

from __future__ import annotations

import dataclasses
import json
from collections import deque
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

N = TypeVar("N")


@runtime_checkable
class PQTree(Protocol[N]):
    """Read-only view of an ordered, labelled tree.

    ``root`` may be ``None`` for an empty tree. Implementations must describe a finite,
    acyclic structure; no cycle detection is performed.
    """

    @property
    def root(self) -> Optional[N]: ...

    def label(self, node: N) -> str: ...

    def children(self, node: N) -> Sequence[N]: ...


@dataclasses.dataclass
class TreeNode:
    """Simple general tree node with an optional attribute bag."""

    label: str
    children: List["TreeNode"] = dataclasses.field(default_factory=list)
    attributes: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def add_child(self, child: "TreeNode") -> None:
        self.children.append(child)

    def traverse(self) -> Iterable["TreeNode"]:
        queue = deque([self])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.children)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "label": self.label,
            "children": [child.to_dict() for child in self.children],
        }
        if self.attributes:
            data["attributes"] = self.attributes
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TreeNode":
        current = cls(label=str(data["label"]), attributes=dict(data.get("attributes", {})))
        for child in data.get("children", []):
            current.add_child(cls.from_dict(child))
        return current

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def pretty_print(self, *, indent: str = "  ", level: int = 0) -> str:
        line = f"{indent * level}- {self.label}\n"
        for child in self.children:
            line += child.pretty_print(indent=indent, level=level + 1)
        return line


class NodeTree:
    """Adapts a :class:`TreeNode` hierarchy to the :class:`PQTree` protocol."""

    def __init__(self, root: Optional[TreeNode]):
        self._root = root

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def label(self, node: TreeNode) -> str:
        return node.label

    def children(self, node: TreeNode) -> Sequence[TreeNode]:
        return node.children

    def __repr__(self) -> str:
        return f"NodeTree({self._root.label if self._root else None!r})"


def node(label: str, *children: TreeNode) -> TreeNode:
    """Build a node inline: ``node("a", node("b"), node("c"))``."""
    return TreeNode(label=label, children=list(children))


def tree(root: Optional[TreeNode]) -> NodeTree:
    return NodeTree(root)


def as_pq_tree(value: Any) -> PQTree:
    """Accept either a :class:`PQTree` implementation or a bare :class:`TreeNode`."""
    if isinstance(value, TreeNode):
        return NodeTree(value)
    if isinstance(value, PQTree):
        return value
    raise TypeError(f"Expected a TreeNode or PQTree, got {type(value).__name__}")


def tree_size(root: TreeNode) -> int:
    return sum(1 for _ in root.traverse())


def tree_depth(root: TreeNode) -> int:
    max_depth = 0
    stack = [(root, 1)]
    while stack:
        current, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current.children:
            stack.append((child, depth + 1))
    return max_depth
