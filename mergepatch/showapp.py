# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .log import MergePatchError, error
from .patch_format import Missing
from .prettyprint import pretty_print_patch
from .utils import read_json, setup_std_streams


_description = "Pretty-print a JSON merge patch document."


def main_show(args):
    patch_filename = args.patch
    if not os.path.exists(patch_filename):
        error("Missing file %s", patch_filename)
        return 1

    try:
        diff = read_json(patch_filename)
    except MergePatchError as e:
        error("%s", e)
        return 1

    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_patch(Missing, diff, "", config)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the mergepatch-show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'mergepatch-show',
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["patch"])
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
