# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing import diff_trees
from .log import MergePatchError, error, info
from .prettyprint import pretty_print_document_patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Compute the JSON merge patch between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    old_filename = args.old
    new_filename = args.new
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (old_filename, new_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            error("Missing file %s", fn)
            return 1

    try:
        a = read_json(old_filename, on_null='empty')
        b = read_json(new_filename, on_null='empty')
    except MergePatchError as e:
        error("%s", e)
        return 1

    d = diff_trees(a, b, include=args.include or ())

    # Output as JSON to file, or print to stdout:
    if output:
        write_json(d, output, indent=args.indent, sort_keys=args.sort_keys)
        info("Wrote merge patch to %s", output)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_document_patch(old_filename, new_filename, a, d, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the mergepatch-diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'mergepatch-diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["old", "new"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
