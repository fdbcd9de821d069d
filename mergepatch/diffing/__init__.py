# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import compute_diff, diff_trees
from .records import diff, diff_including

__all__ = ["compute_diff", "diff_trees", "diff", "diff_including"]
