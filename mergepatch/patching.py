# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import dataclasses

from pydantic import BaseModel

from .conversion import to_tree, from_tree, as_patch_tree, type_name
from .log import debug


__all__ = ["merge_patch", "patch", "apply", "apply_in_place"]


def merge_patch(target, diff):
    """Merge a patch into target, modifying it in place where possible.

    Follows RFC 7396: an object patch turns a non-object target into
    an empty object before merging, null entries remove keys, and any
    other patch replaces the target. Returns the merged value, which
    is a different object than target when the target was replaced.
    """
    if not isinstance(diff, dict):
        return copy.deepcopy(diff)

    if not isinstance(target, dict):
        target = {}

    for key, value in diff.items():
        assert isinstance(key, str), 'object key must be string'
        if value is None:
            target.pop(key, None)
        else:
            target[key] = merge_patch(target.get(key), value)

    return target


def patch(obj, diff):
    """Produce a patched version of tree value obj with given merge patch.

    obj is left untouched.
    """
    return merge_patch(copy.deepcopy(obj), diff)


def apply(base, diff, cls=None):
    """Apply a merge patch to a record, returning a new record.

    diff is a patch document as str or bytes-like, or an already
    parsed tree value. The result is validated into cls, which
    defaults to the type of base. base is left untouched.

    Raises PatchParseError for malformed patch documents and
    ConversionError when the result does not fit cls.
    """
    if cls is None:
        cls = type(base)
    d = as_patch_tree(diff)
    tree = to_tree(base)
    if isinstance(d, dict):
        debug("Applying merge patch with %d top-level entries to %s",
              len(d), type_name(cls))
    else:
        debug("Applying replacement patch to %s", type_name(cls))
    tree = merge_patch(tree, d)
    return from_tree(tree, cls)


def _check_mutable(base):
    if isinstance(base, BaseModel):
        if base.model_config.get("frozen"):
            raise TypeError("Cannot patch frozen model %s in place" % type(base).__name__)
    elif dataclasses.is_dataclass(base) and not isinstance(base, type):
        if type(base).__dataclass_params__.frozen:
            raise TypeError("Cannot patch frozen dataclass %s in place" % type(base).__name__)
    elif not isinstance(base, (dict, list)):
        raise TypeError("Cannot patch %s in place" % type(base).__name__)


def _assign(base, updated):
    "Overwrite the contents of base with those of updated."
    if isinstance(base, BaseModel):
        object.__setattr__(base, "__dict__", updated.__dict__)
        object.__setattr__(base, "__pydantic_fields_set__", updated.__pydantic_fields_set__)
        object.__setattr__(base, "__pydantic_extra__", updated.__pydantic_extra__)
    elif isinstance(base, dict):
        base.clear()
        base.update(updated)
    elif isinstance(base, list):
        base[:] = updated
    else:
        for field in dataclasses.fields(base):
            setattr(base, field.name, getattr(updated, field.name))


def apply_in_place(base, diff):
    """Apply a merge patch to a record, updating it in place.

    base must be a mutable pydantic model, dataclass instance, dict
    or list. It is only modified once the patched value has been
    validated, so on any error it is left as it was.
    """
    _check_mutable(base)
    updated = apply(base, diff)
    _assign(base, updated)
