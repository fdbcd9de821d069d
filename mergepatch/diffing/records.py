# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..conversion import to_tree
from .generic import diff_trees

__all__ = ["diff", "diff_including"]


def diff(old, new):
    """Compute the merge patch between two records of the same type.

    Only changed fields are included; fields removed in new are
    mapped to None. Returns {} if nothing changed.
    """
    return diff_trees(to_tree(old), to_tree(new))


def diff_including(old, new, including):
    """Compute the merge patch between two records, forcing some fields in.

    including is a sequence of dot separated paths ("id",
    "profile.bio") whose current value is always part of the patch,
    changed or not. Useful to carry identifying fields along.
    """
    if isinstance(including, str):
        including = [including]
    return diff_trees(to_tree(old), to_tree(new), include=including)
