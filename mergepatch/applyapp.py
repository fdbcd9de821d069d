# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .log import MergePatchError, error, info
from .patching import patch
from .prettyprint import pretty_print_value
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a JSON merge patch from mergepatch-diff to a JSON document."


def main_apply(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            error("Missing file %s", fn)
            return 1

    try:
        before = read_json(base_filename, on_null='null')
        diff = read_json(patch_filename, on_null='empty')
    except MergePatchError as e:
        error("%s", e)
        return 1

    after = patch(before, diff)

    if output_filename:
        write_json(after, output_filename, indent=args.indent)
        info("Wrote patched document to %s", output_filename)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")

        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_value(after, config=config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the mergepatch-apply command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'mergepatch-apply',
        add_help=True,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of the patched document written to file.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())
