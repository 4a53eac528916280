#!/usr/bin/env python3
"""
TinyForth - a tiny threaded Forth interpreter

Usage:
    python main.py                   interactive REPL
    python main.py FILE [FILE ...]   run Forth source files
    python main.py -i FILE           run files, then start the REPL
"""

import argparse
import logging
import sys

from tinyforth import Bye, InteractiveForth, InterpretationError


def build_parser():
    parser = argparse.ArgumentParser(
        description="A tiny threaded Forth interpreter")
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="Forth source files to run in order")
    parser.add_argument('-i', '--interactive', action='store_true',
                        help="start the REPL after running the files")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="print status messages")
    parser.add_argument('--debug', action='store_true',
                        help="print debug messages")
    return parser


def run_file(forth, path):
    with open(path, 'r') as file:
        forth.execute(file.read())


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    forth = InteractiveForth()
    try:
        for path in args.files:
            logging.info("running %s", path)
            run_file(forth, path)
    except Bye as e:
        return e.code
    except InterpretationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.interactive or not args.files:
        return forth.repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
