# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, TextIO


def write_diagnostic(file:TextIO, prog:str, *parts:Any) -> None:
  'Write a single `prog: part: ...` line to `file`, e.g. `sri: missing.js: No such file or directory`.'
  print(prog, *parts, sep=': ', file=file, flush=True)
