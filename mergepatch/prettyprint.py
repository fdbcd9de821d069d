# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diffing.comparing import trees_equal
from .patch_format import Missing, subpath


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing, JSON style for null and booleans."
    if v is None:
        return "null"
    elif v is True:
        return "true"
    elif v is False:
        return "false"
    elif isinstance(v, str):
        return v
    return pprint.pformat(v)


def format_path(path):
    return path or "(root)"


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict):
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, format_path(path), config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_patch_entry(a, key, value, path, config=DefaultConfig):
    """Pretty-print a single entry of an object patch.

    a is the object the patch applies to, or Missing if unknown.
    """
    nextpath = subpath(path, key)
    old = Missing if a is Missing else a.get(key, Missing)

    if value is None:
        pretty_print_patch_action("deleted", nextpath, config)
        if old is not Missing:
            pretty_print_value(old, config.REMOVE, config)

    elif isinstance(value, dict) and isinstance(old, dict):
        # Recurse to show nested changes
        pretty_print_patch(old, value, nextpath, config)
        return

    elif old is Missing:
        pretty_print_patch_action("added" if a is not Missing else "set", nextpath, config)
        pretty_print_value(value, config.ADD, config)

    elif trees_equal(old, value):
        # Forced into the patch without being changed
        pretty_print_patch_action("kept", nextpath, config)
        pretty_print_value(value, config.KEEP, config)

    else:
        if type(old) is not type(value):
            typechange = " (type changed from %s to %s)" % (
                old.__class__.__name__, value.__class__.__name__)
        else:
            typechange = ""
        pretty_print_patch_action("replaced" + typechange, nextpath, config)
        pretty_print_value(old, config.REMOVE, config)
        pretty_print_value(value, config.ADD, config)

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(a, di, path="", config=DefaultConfig):
    """Pretty-print a merge patch.

    a is the value the patch applies to, pass Missing to print
    the patch on its own.
    """
    if not isinstance(di, dict):
        pretty_print_patch_action("replaced", path, config)
        if a is not Missing:
            pretty_print_value(a, config.REMOVE, config)
        pretty_print_value(di, config.ADD, config)
        config.out.write(PATCH_ENTRY_END + config.RESET)
        return

    if a is not Missing and not isinstance(a, dict):
        # The patch turns a into an object before merging
        pretty_print_patch_action("replaced", path, config)
        pretty_print_value(a, config.REMOVE, config)
        config.out.write(PATCH_ENTRY_END + config.RESET)
        a = {}

    for key in sorted(di):
        pretty_print_patch_entry(a, key, di[key], path, config)


patch_header = """\
mergepatch {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_patch(afn, bfn, a, di, config=DefaultConfig):
    """Pretty-print the patch between two documents

    Parameters
    ----------

    afn: str
        Filename of a, the old document
    bfn: str
        Filename of b, the new document
    a: tree value
        The old document
    di: merge patch
        The patch describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining where and how output is printed
    """
    if di != {}:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(patch_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(a, di, "", config)
