#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

MERGEPATCH_PATH = HERE / "mergepatch"


def get_version(path):
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(MERGEPATCH_PATH / '_version.py')

LONG_DESCRIPTION = """\
Compute and apply JSON Merge Patch (RFC 7396) documents between two
versions of the same record, with optional forced inclusion of
unchanged fields such as identifiers.
"""


if __name__ == '__main__':
    setup(
      name="mergepatch",
      version=VERSION,
      description="Structural JSON merge patches between typed records",
      long_description=LONG_DESCRIPTION,
      license="BSD",
      packages=find_packages(include=["mergepatch", "mergepatch.*"]),
      package_data={"mergepatch.tests": ["files/*.json"]},
      python_requires=">=3.8",
      install_requires=[
          "pydantic>=2",
          "traitlets>=5",
          "colorama",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "mergepatch = mergepatch.__main__:main_dispatch",
              "mergepatch-diff = mergepatch.diffapp:main",
              "mergepatch-apply = mergepatch.applyapp:main",
              "mergepatch-show = mergepatch.showapp:main",
          ],
      },
      )
