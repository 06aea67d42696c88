#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from io import TextIOWrapper
from sys import exit
from typing import Sequence

from .algorithm import Algorithm, algorithm_names, DEFAULT_ALGORITHM
from .dispatch import run
from .errors import StartupConfigError
from .io import write_diagnostic
from .resolve import STDIN_REF


PROG = 'sri'

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

description = '''\
Computes a cryptographic hash for each of the given files or HTTP URLs.
For each file/URL, prints the hash in Subresource Integrity format,
followed by a tab character, the filename/URL and a newline.
If no files are given, reads standard input.
A file named "-" is also interpreted to mean standard input.
If zero or one positional arguments are given,
print only the hash without a filename.
'''


def main(args:Sequence[str]|None=None) -> None:
  parser = ArgumentParser(prog=PROG, description=description, formatter_class=RawDescriptionHelpFormatter)
  parser.add_argument('-hash', default=DEFAULT_ALGORITHM.value,
    help=f'Hash function to use: {", ".join(algorithm_names)}. Defaults to {DEFAULT_ALGORITHM}.')
  parser.add_argument('refs', nargs='*', metavar='file_or_url', help='Files, URLs, or "-" for standard input.')
  ns = parser.parse_args(args)

  try: algorithm = Algorithm.from_name(ns.hash)
  except StartupConfigError as e:
    write_diagnostic(sys.stderr, PROG, e.msg)
    print('available hash functions:', *algorithm_names, file=sys.stderr)
    exit(EXIT_CONFIG_ERROR)

  refs = ns.refs or [STDIN_REF]
  if isinstance(sys.stdout, TextIOWrapper):
    # Undecodable path bytes arrive from argv as surrogates; write them back out as the original bytes.
    sys.stdout.reconfigure(errors='surrogateescape')
  if not run(refs, algorithm, prog=PROG):
    exit(EXIT_FAILURE)


if __name__ == '__main__': main()
