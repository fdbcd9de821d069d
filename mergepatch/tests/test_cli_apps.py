# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging
import os

import pytest

import mergepatch
from mergepatch import applyapp, diffapp, showapp
from mergepatch.__main__ import main_dispatch
from mergepatch.applyapp import main_apply
from mergepatch.diffapp import main_diff
from mergepatch.showapp import main_show
from mergepatch.utils import EXPLICIT_MISSING_FILE


pjoin = os.path.join


def _load(fn):
    with open(fn) as f:
        return json.load(f)


def test_diff_app_writes_patch(tempfiles, isolated_config):
    afn = pjoin(tempfiles, "user-old.json")
    bfn = pjoin(tempfiles, "user-new.json")
    dfn = pjoin(tempfiles, "out-patch.json")

    assert 0 == diffapp.main([afn, bfn, '--out', dfn])
    assert _load(dfn) == _load(pjoin(tempfiles, "user-patch.json"))

    # Compact, sorted output by default
    with open(dfn) as f:
        text = f.read()
    assert text.startswith('{"active":false,"age":31,')
    assert text.endswith('}\n')


def test_diff_app_include(tempfiles, isolated_config):
    afn = pjoin(tempfiles, "user-old.json")
    bfn = pjoin(tempfiles, "user-new.json")
    dfn = pjoin(tempfiles, "out-patch.json")

    assert 0 == diffapp.main([afn, bfn, '-i', 'id', '--include', 'username', '--out', dfn])
    d = _load(dfn)
    assert d["id"] == 1001
    assert d["username"] == "alice"

    assert 0 == diffapp.main([afn, afn, '-i', 'profile.bio', '--out', dfn])
    assert _load(dfn) == {"profile": {"bio": "Software engineer"}}


def test_diff_app_indent(tempfiles, isolated_config):
    afn = pjoin(tempfiles, "user-old.json")
    bfn = pjoin(tempfiles, "user-new.json")
    dfn = pjoin(tempfiles, "out-patch.json")

    assert 0 == diffapp.main([afn, bfn, '--indent', '2', '--out', dfn])
    with open(dfn) as f:
        text = f.read()
    assert text.startswith('{\n  "active": false,\n')


def test_diff_app_prints(filespath, isolated_config, capsys):
    afn = pjoin(filespath, "user-old.json")
    bfn = pjoin(filespath, "user-new.json")

    args = diffapp._build_arg_parser().parse_args([afn, bfn, '--log-level=WARN', '--no-color'])
    assert 0 == main_diff(args)
    assert args.log_level == 'WARN'
    assert mergepatch.log.logger.level == logging.WARN

    out, _ = capsys.readouterr()
    assert "--- %s" % afn in out
    assert "## replaced age:\n-  30\n+  31\n" in out
    assert "## deleted profile.avatar_url:\n" in out


def test_diff_app_identical_prints_nothing(filespath, isolated_config, capsys):
    afn = pjoin(filespath, "user-old.json")
    assert 0 == diffapp.main([afn, afn])
    out, _ = capsys.readouterr()
    assert out == ""


def test_diff_app_null_file(filespath, isolated_config):
    fn = pjoin(filespath, "user-old.json")

    args = diffapp._build_arg_parser().parse_args([fn, EXPLICIT_MISSING_FILE])
    assert 0 == main_diff(args)

    args = diffapp._build_arg_parser().parse_args([EXPLICIT_MISSING_FILE, fn])
    assert 0 == main_diff(args)


def test_diff_app_missing_file(filespath, isolated_config):
    fn = pjoin(filespath, "user-old.json")
    assert 1 == diffapp.main([fn, pjoin(filespath, "does-not-exist.json")])


def test_diff_app_invalid_json(filespath, isolated_config):
    fn = pjoin(filespath, "user-old.json")
    assert 1 == diffapp.main([fn, pjoin(filespath, "invalid.json")])


def test_apply_app_writes_document(tempfiles, isolated_config):
    bfn = pjoin(tempfiles, "user-old.json")
    pfn = pjoin(tempfiles, "user-patch.json")
    ofn = pjoin(tempfiles, "out.json")

    assert 0 == applyapp.main([bfn, pfn, '-o', ofn])

    expected = _load(pjoin(tempfiles, "user-new.json"))
    # Null in a patch deletes the key
    del expected["profile"]["avatar_url"]
    assert _load(ofn) == expected


def test_apply_app_prints(filespath, isolated_config, capsys):
    bfn = pjoin(filespath, "user-old.json")
    pfn = pjoin(filespath, "user-patch.json")

    args = applyapp._build_arg_parser().parse_args([bfn, pfn])
    assert 0 == main_apply(args)
    out, _ = capsys.readouterr()
    assert "age: 31" in out
    assert "avatar_url" not in out


def test_apply_app_null_base(tempfiles, isolated_config):
    pfn = pjoin(tempfiles, "user-patch.json")
    ofn = pjoin(tempfiles, "out.json")

    assert 0 == applyapp.main([EXPLICIT_MISSING_FILE, pfn, '-o', ofn])
    assert _load(ofn) == {
        "active": False,
        "age": 31,
        "tags": ["admin"],
        "profile": {"bio": "Senior software engineer"},
        }


def test_apply_app_errors(filespath, isolated_config):
    bfn = pjoin(filespath, "user-old.json")
    assert 1 == applyapp.main([bfn, pjoin(filespath, "does-not-exist.json")])
    assert 1 == applyapp.main([bfn, pjoin(filespath, "invalid.json")])


def test_show_app(filespath, isolated_config, capsys):
    pfn = pjoin(filespath, "user-patch.json")

    args = showapp._build_arg_parser().parse_args([pfn, '--log-level=CRITICAL', '--no-color'])
    assert 0 == main_show(args)
    assert args.log_level == 'CRITICAL'
    assert mergepatch.log.logger.level == logging.CRITICAL

    out, _ = capsys.readouterr()
    assert "## set age:\n+  31\n" in out
    assert "## set profile:\n+  avatar_url: null\n+  bio: Senior software engineer\n" in out


def test_show_app_errors(filespath, isolated_config):
    assert 1 == showapp.main([pjoin(filespath, "does-not-exist.json")])
    assert 1 == showapp.main([pjoin(filespath, "invalid.json")])


def test_main_dispatch(tempfiles, isolated_config):
    afn = pjoin(tempfiles, "user-old.json")
    bfn = pjoin(tempfiles, "user-new.json")
    dfn = pjoin(tempfiles, "out-patch.json")
    ofn = pjoin(tempfiles, "out.json")

    assert 0 == main_dispatch(["diff", afn, bfn, "--out", dfn])
    assert 0 == main_dispatch(["apply", afn, dfn, "-o", ofn])
    assert _load(ofn)["age"] == 31


def test_main_dispatch_version():
    with pytest.raises(SystemExit) as e:
        main_dispatch(["--version"])
    assert e.value.code == mergepatch.__version__


def test_main_dispatch_unknown_command():
    with pytest.raises(SystemExit) as e:
        main_dispatch(["frobnicate"])
    assert "Unrecognized command 'frobnicate'" in e.value.code

    with pytest.raises(SystemExit) as e:
        main_dispatch([])
    assert "Option missing" in e.value.code
