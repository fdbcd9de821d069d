# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import math

from .log import PatchFormatError


# Sentinel to allow None as a value
Missing = object()


scalar_types = (bool, int, float, str)


def empty_patch():
    "The patch document that leaves any target unchanged."
    return {}


def is_valid_tree(value, deep=True):
    """Checks whether a value is a well formed tree value.

    Returns a boolean indicating the well-formedness of the value.
    """
    try:
        validate_tree(value, deep=deep)
    except PatchFormatError:
        return False
    return True


def validate_tree(value, deep=True, path=""):
    """Check whether value is a well formed tree value.

    A tree value is None, a bool, a finite number, a string,
    a list of tree values or a dict mapping strings to tree values.

    Raises a PatchFormatError if not well formed.
    """
    if value is None:
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise PatchFormatError(
                "Non-finite number {!r} at '{}' has no JSON representation.".format(
                    value, path or "/"))
    elif isinstance(value, scalar_types):
        pass
    elif isinstance(value, list):
        if deep:
            for i, item in enumerate(value):
                validate_tree(item, deep=deep, path="{}[{}]".format(path, i))
    elif isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise PatchFormatError(
                    "Invalid object key {!r} of type '{}' at '{}'. "
                    "Expecting str.".format(key, type(key).__name__, path or "/"))
            if deep:
                validate_tree(item, deep=deep, path=subpath(path, key))
    else:
        raise PatchFormatError(
            "Value of type '{}' at '{}' is not a valid tree value.".format(
                type(value).__name__, path or "/"))


def subpath(path, key):
    "Extend a dot separated path with key, 'profile' + 'bio' -> 'profile.bio'."
    if not path:
        return key
    return ".".join((path, key))


class MergePatchBuilder(object):
    """Collects the entries of one object level of a merge patch.

    Keys are kept in insertion order, which makes the emitted patch
    deterministic for a given traversal of the new tree.
    """

    def __init__(self):
        self._patch = {}

    def validated(self):
        return self._patch

    def __len__(self):
        return len(self._patch)

    def append(self, key, value):
        # Typechecking (just for internal consistency checking)
        assert isinstance(key, str), 'object key must be string'
        assert key not in self._patch, 'multiple patch entries target same key: %r' % key
        self._patch[key] = value

    def set(self, key, value):
        "Add an entry replacing or merging into the target value at key."
        self.append(key, value)

    def remove(self, key):
        "Add a deletion marker for key."
        self.append(key, None)
