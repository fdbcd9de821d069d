# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_including, diff_trees, compute_diff
from .patching import apply, apply_in_place, merge_patch, patch
from .conversion import to_tree, from_tree, loads_patch, dumps_patch
from .log import MergePatchError, ConversionError, PatchParseError, PatchFormatError


__all__ = [
    "__version__",
    "diff", "diff_including", "diff_trees", "compute_diff",
    "apply", "apply_in_place", "merge_patch", "patch",
    "to_tree", "from_tree", "loads_patch", "dumps_patch",
    "MergePatchError", "ConversionError", "PatchParseError", "PatchFormatError",
    ]
