# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import dataclasses
import os
from typing import Dict, List, Optional

from pydantic import BaseModel

from mergepatch import apply, diff, diff_trees, dumps_patch, patch
from mergepatch.diffing.comparing import trees_equal
from mergepatch.patch_format import is_valid_tree


pjoin = os.path.join


class Profile(BaseModel):
    bio: str
    avatar_url: Optional[str] = None


class User(BaseModel):
    id: int
    username: str
    age: int
    active: bool
    profile: Optional[Profile] = None


class Settings(BaseModel):
    name: str
    tags: List[str] = []
    limits: Dict[str, int] = {}
    parent: Optional["Settings"] = None


@dataclasses.dataclass
class Point:
    x: int
    y: int
    label: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


def make_old_user():
    return User(
        id=1001,
        username="alice",
        age=30,
        active=True,
        profile=Profile(
            bio="Software engineer",
            avatar_url="https://example.com/alice-old.jpg",
        ),
    )


def make_new_user():
    return User(
        id=1001,
        username="alice",
        age=31,
        active=False,
        profile=Profile(
            bio="Senior software engineer",
            avatar_url=None,
        ),
    )


def check_diff_and_patch(a, b):
    "Check that patch(a, diff_trees(a,b)) reproduces b."
    d = diff_trees(a, b)
    assert is_valid_tree(d)
    assert trees_equal(patch(a, d), b)


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff_trees(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def check_diff_and_apply(old, new):
    "Check that a serialized diff of two records applied to old gives new."
    d = diff(old, new)
    assert apply(old, dumps_patch(d)) == new
