"""Approximate tree distances based on pq-gram profiles."""

from .comparison import ComparisonMetrics, ComparisonResult, compute_comparison
from .distance import (
    DEFAULT_P,
    DEFAULT_Q,
    DEFAULT_W,
    PQOptions,
    PQWindowedOptions,
    pq_distance,
    pq_distance_windowed,
)
from .profile import PQGramProfile
from .register import ABSENT, Register
from .tree import NodeTree, PQTree, TreeNode, node, tree
from .validation import IncompatibleArityError, InvalidArgumentError, require_positive_integer

__all__ = [
    "ABSENT",
    "ComparisonMetrics",
    "ComparisonResult",
    "DEFAULT_P",
    "DEFAULT_Q",
    "DEFAULT_W",
    "IncompatibleArityError",
    "InvalidArgumentError",
    "NodeTree",
    "PQGramProfile",
    "PQOptions",
    "PQTree",
    "PQWindowedOptions",
    "Register",
    "TreeNode",
    "compute_comparison",
    "node",
    "pq_distance",
    "pq_distance_windowed",
    "require_positive_integer",
    "tree",
]
