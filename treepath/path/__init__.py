"""Hierarchical tree paths: parsing, normalization and path algebra."""

from .algebra import (
    form_absolute_path,
    form_relative_path,
    get_component_name,
    get_parent_path,
    get_parent_path_string,
    get_subcomponent_name_at_level,
    split,
)
from .errors import (
    AboveRootError,
    ErrorKind,
    InvalidCharacterError,
    InvalidSegmentError,
    FlavorMismatchError,
    NotAbsoluteError,
    PathError,
    PathIndexError,
)
from .flavor import COMPONENT_FLAVOR, PathFlavor
from .normalizer import normalize, tokenize, validate
from .tree_path import TreePath, component_path

__all__ = [
    "TreePath",
    "component_path",
    "PathFlavor",
    "COMPONENT_FLAVOR",
    "validate",
    "normalize",
    "tokenize",
    "form_absolute_path",
    "form_relative_path",
    "get_parent_path",
    "get_parent_path_string",
    "get_subcomponent_name_at_level",
    "get_component_name",
    "split",
    "ErrorKind",
    "PathError",
    "InvalidCharacterError",
    "InvalidSegmentError",
    "AboveRootError",
    "NotAbsoluteError",
    "FlavorMismatchError",
    "PathIndexError",
]
