# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

__all__ = ["is_atomic", "trees_equal"]


def is_atomic(x):
    "Arrays and scalars are compared and replaced as a whole."
    return not isinstance(x, dict)


def _is_number(x):
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def trees_equal(x, y):
    """Deep structural equality of two tree values.

    Unlike ==, booleans never equal numbers and an integer never
    equals a float, since they serialize to different JSON.
    """
    if isinstance(x, dict):
        if not isinstance(y, dict) or len(x) != len(y):
            return False
        for key, value in x.items():
            if key not in y or not trees_equal(value, y[key]):
                return False
        return True

    elif isinstance(x, list):
        if not isinstance(y, list) or len(x) != len(y):
            return False
        return all(trees_equal(a, b) for a, b in zip(x, y))

    elif isinstance(x, bool) or isinstance(y, bool):
        return isinstance(x, bool) and isinstance(y, bool) and x == y

    elif _is_number(x) or _is_number(y):
        return (_is_number(x) and _is_number(y) and
                isinstance(x, float) == isinstance(y, float) and x == y)

    else:
        return type(x) is type(y) and x == y
