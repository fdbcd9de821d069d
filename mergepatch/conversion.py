# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion between typed records, tree values and patch documents.

Records are anything pydantic can serialize: models, dataclasses,
TypedDicts and plain JSON values. They are turned into tree values
(the JSON data model of dicts, lists and scalars) before diffing or
patching, and validated back into their type afterwards.
"""

import copy
from functools import lru_cache
import json

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .log import ConversionError, PatchFormatError, PatchParseError
from .patch_format import validate_tree


__all__ = ["to_tree", "from_tree", "loads_patch", "dumps_patch"]


patch_input_types = (str, bytes, bytearray, memoryview)


@lru_cache(maxsize=256)
def _adapter(cls):
    return TypeAdapter(cls)


def type_name(cls):
    return getattr(cls, "__name__", None) or repr(cls)


def get_adapter(cls):
    "Return a (cached) pydantic TypeAdapter for cls."
    try:
        return _adapter(cls)
    except TypeError:
        # Unhashable type annotations cannot be cached
        return TypeAdapter(cls)


def to_tree(record, cls=None):
    """Convert a record into a tree value.

    Raises ConversionError if the record has no tree representation,
    e.g. it contains a non-finite float or a non-string mapping key.
    """
    if cls is None:
        cls = type(record)
    try:
        tree = get_adapter(cls).dump_python(record, mode="json")
    except (PydanticSerializationError, ValidationError, TypeError, ValueError) as e:
        raise ConversionError(
            "Cannot convert {} to a tree value: {}".format(type_name(cls), e)) from e
    try:
        validate_tree(tree)
    except PatchFormatError as e:
        raise ConversionError(
            "Cannot convert {} to a tree value: {}".format(type_name(cls), e)) from e
    return tree


def _fill_missing(tree, error):
    """Copy of tree with null at every location error reports as missing.

    Returns None if there are no such locations.
    """
    locs = [err["loc"] for err in error.errors()
            if err["type"] == "missing" and err["loc"]]
    if not locs:
        return None
    tree = copy.deepcopy(tree)
    for loc in locs:
        node = tree
        try:
            for key in loc[:-1]:
                node = node[key]
        except (KeyError, IndexError, TypeError):
            continue
        if isinstance(node, dict):
            node.setdefault(loc[-1], None)
    return tree


def _validate(adapter, tree):
    return adapter.validate_json(json.dumps(tree, allow_nan=False), strict=True)


def from_tree(tree, cls):
    """Validate a tree value back into a record of type cls.

    Validation is strict: a string is never accepted for a number, nor
    a number for a boolean. A missing field that accepts null is read
    as null, so deleting an optional field without default works.

    Raises ConversionError if the tree does not fit the shape of cls,
    e.g. a required field is missing or has the wrong type.
    """
    try:
        validate_tree(tree)
    except PatchFormatError as e:
        raise ConversionError(
            "Cannot convert tree value to {}: {}".format(type_name(cls), e)) from e
    adapter = get_adapter(cls)
    try:
        return _validate(adapter, tree)
    except ValidationError as e:
        filled = _fill_missing(tree, e)
        if filled is not None:
            try:
                return _validate(adapter, filled)
            except ValidationError:
                # Missing fields do not accept null, report the original error
                pass
        raise ConversionError(
            "Cannot convert tree value to {}: {}".format(type_name(cls), e)) from e


def _reject_constant(name):
    raise ValueError("Invalid JSON constant: %s" % name)


def loads_patch(data):
    """Parse a patch document from text or bytes.

    Bytes are decoded as UTF-8 (with or without BOM).
    Raises PatchParseError on malformed input.
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise PatchParseError("Patch document is not valid UTF-8: %s" % e) from e
    if not isinstance(data, str):
        raise TypeError(
            "Patch document must be str or bytes-like, not %r" % type(data).__name__)
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        raise PatchParseError("Invalid patch document: %s" % e) from e


def as_patch_tree(patch):
    "Parse patch if it is text or bytes, otherwise validate it as a tree value."
    if isinstance(patch, patch_input_types):
        return loads_patch(patch)
    validate_tree(patch)
    return patch


def dumps_patch(patch, indent=None, sort_keys=True):
    """Serialize a patch tree to a JSON string.

    The default output is compact with sorted keys, so equal
    patches always serialize to equal strings.
    """
    if indent is None:
        separators = (",", ":")
    else:
        separators = (",", ": ")
    return json.dumps(patch, indent=indent, sort_keys=sort_keys,
                      separators=separators, allow_nan=False)
