# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import shutil

from pytest import fixture, skip

from .utils import make_old_user, make_new_user


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory with an empty home, so no config files are found."""
    home = tmpdir.mkdir('home')
    work = tmpdir.mkdir('work')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    monkeypatch.chdir(str(work))
    return str(work)


@fixture
def old_user():
    return make_old_user()


@fixture
def new_user():
    return make_new_user()
