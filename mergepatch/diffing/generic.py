# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from ..log import debug
from ..patch_format import Missing, MergePatchBuilder, empty_patch

from .comparing import is_atomic, trees_equal
from .config import DiffConfig

__all__ = ["compute_diff", "diff_objects", "diff_trees"]


def compute_diff(old, new, path="", config=None):
    """Compute the merge patch turning old into new.

    old may be Missing, meaning there was no value at path.
    Returns Missing when there is nothing to patch at path.
    """
    if config is None:
        config = DiffConfig()

    if old is not Missing and not is_atomic(old) and not is_atomic(new):
        return diff_objects(old, new, path=path, config=config)

    # Atomic values (including arrays) are either kept or replaced whole
    if old is not Missing and trees_equal(old, new) and not config.is_forced(path):
        return Missing
    return copy.deepcopy(new)


def diff_objects(old, new, path="", config=None):
    """Compute the merge patch of two objects.

    Keys of new come first, in their order in new, followed by
    deletion markers for keys only present in old. A forced key
    without changes below it is included with its full new value.
    """
    if config is None:
        config = DiffConfig()

    if not isinstance(old, dict) or not isinstance(new, dict):
        raise TypeError('Arguments to diff_objects need to be dicts, got %r and %r' % (old, new))

    di = MergePatchBuilder()

    for key, new_value in new.items():
        keypath = config.subpath(path, key)
        dd = compute_diff(old.get(key, Missing), new_value, path=keypath, config=config)
        if dd is not Missing:
            di.set(key, dd)
        elif config.is_forced(keypath):
            di.set(key, copy.deepcopy(new_value))

    for key in old:
        if key not in new:
            di.remove(key)

    if not di:
        return Missing
    return di.validated()


def diff_trees(old, new, include=None):
    """Compute a merge patch (RFC 7396) between two tree values.

    Paths in include are dot separated ("profile.bio") and are
    included in the patch even when unchanged. An unchanged pair
    gives the empty patch {}.
    """
    config = DiffConfig(include=include)
    d = compute_diff(old, new, path="", config=config)
    if d is Missing:
        debug("No changes found, returning empty patch")
        return empty_patch()
    if isinstance(d, dict):
        debug("Computed merge patch with %d top-level entries", len(d))
    return d
