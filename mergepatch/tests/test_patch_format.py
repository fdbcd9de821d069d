# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from mergepatch.log import PatchFormatError
from mergepatch.patch_format import (
    MergePatchBuilder, is_valid_tree, validate_tree, subpath,
)


def test_valid_trees():
    for value in (None, True, 0, -1.5, "", [], {}, {"a": [1, {"b": None}]}):
        assert is_valid_tree(value)
        validate_tree(value)


def test_invalid_trees():
    for value in (float("inf"), float("nan"), (1, 2), {1, 2}, b"x",
                  object(), {1: "a"}, {"a": [1, (2,)]}, {"a": {"b": -float("inf")}}):
        assert not is_valid_tree(value)
        with pytest.raises(PatchFormatError):
            validate_tree(value)


def test_shallow_validation():
    assert is_valid_tree([object()], deep=False)
    assert not is_valid_tree({1: "a"}, deep=False)


def test_validate_tree_reports_path():
    with pytest.raises(PatchFormatError) as exc:
        validate_tree({"profile": {"scores": [1, float("nan")]}})
    assert "profile.scores[1]" in str(exc.value)


def test_paths():
    assert subpath("", "id") == "id"
    assert subpath("profile", "bio") == "profile.bio"


def test_builder():
    di = MergePatchBuilder()
    assert len(di) == 0
    di.set("b", 1)
    di.remove("a")
    assert di.validated() == {"b": 1, "a": None}
    assert list(di.validated()) == ["b", "a"]
    with pytest.raises(AssertionError):
        di.set("b", 2)
