"""The mirror tree: an index structure that describes a padded array.

The tree has one level per input dimension.
Internal nodes list their children (the slices along the next dimension)
and, once padding is applied, the children to repeat before and after them.
Leaves point at single input elements.
Walking the tree in order (left mirrors, children, right mirrors)
yields the padded array in row-major order.

Every link is an index into a flat arena of `PadNode`s,
so the whole structure can be reset and reused between calls.

The stages run strictly in sequence:
`build_tree`, `bind_tree`, `validate_tree`, `apply_padding`, `flatten_tree`.
"""

from ._apply import apply_padding
from ._build import bind_tree, build_tree, iter_leaves
from ._commons import ROOT, Arena, PadNode, arena_size, check_shape, numel
from ._flatten import fill_output, flatten_tree
from ._validate import validate_tree

__all__ = [
    "ROOT",
    "Arena",
    "PadNode",
    "apply_padding",
    "arena_size",
    "bind_tree",
    "build_tree",
    "check_shape",
    "fill_output",
    "flatten_tree",
    "iter_leaves",
    "numel",
    "validate_tree",
]
