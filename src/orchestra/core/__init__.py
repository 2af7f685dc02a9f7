"""
Orchestra core: token tree, classification, mode flattening, alias
resolution and the brand walker.
"""

from .aliases import parse_reference, resolve_alias
from .classifier import Classification, ClassificationStrategy, GroupOverrides, classify_groups
from .config import AndroidFormat, BuildConfig, load_build_config
from .modes import build_primitive_lookup, flatten_group, is_mode_nested
from .strings import CaseStyle, convert_case
from .tree import TokenGroup, TokenLeaf, TokenNode, normalize_tree, tree_to_raw
from .walker import ResolvedToken, walk_brand

__all__ = [
    "AndroidFormat",
    "BuildConfig",
    "CaseStyle",
    "Classification",
    "ClassificationStrategy",
    "GroupOverrides",
    "ResolvedToken",
    "TokenGroup",
    "TokenLeaf",
    "TokenNode",
    "build_primitive_lookup",
    "classify_groups",
    "convert_case",
    "flatten_group",
    "is_mode_nested",
    "load_build_config",
    "normalize_tree",
    "parse_reference",
    "resolve_alias",
    "tree_to_raw",
    "walk_brand",
]
