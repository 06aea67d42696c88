# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Concurrent digesting of many inputs.

Each reference gets its own worker thread, which resolves the reference, digests it,
and puts exactly one DigestResult onto a shared queue.
The calling thread is the only consumer of the queue, and the only writer of the output and error streams.
Results are reported in the order the references were given, regardless of completion order.
'''

import sys
from dataclasses import dataclass
from queue import SimpleQueue
from threading import Thread
from typing import BinaryIO, Iterator, Sequence, TextIO

from .algorithm import Algorithm
from .digest import digest_stream
from .errors import os_error_msg, SriError, WriteError
from .format import fmt_sri
from .io import write_diagnostic
from .resolve import open_input


@dataclass(frozen=True)
class DigestResult:
  'The outcome of digesting a single reference. Exactly one of `digest` and `error` is set.'
  index:int
  ref:str
  digest:bytes|None = None
  error:Exception|None = None

  def __post_init__(self) -> None:
    if (self.digest is None) == (self.error is None):
      raise ValueError(f'DigestResult requires exactly one of `digest` or `error`: {self!r}')

  @property
  def is_ok(self) -> bool: return self.error is None

  @property
  def error_msg(self) -> str:
    e = self.error
    if e is None: return ''
    if isinstance(e, SriError): return e.msg
    return str(e) or type(e).__name__


def digest_ref(index:int, ref:str, algorithm:Algorithm, stdin:BinaryIO|None=None) -> DigestResult:
  'Resolve and digest a single reference, capturing any failure in the result.'
  try:
    stream = open_input(ref, stdin=stdin)
    digest = digest_stream(stream, algorithm, ref=ref)
  except Exception as e: # Any failure belongs to this reference alone; the aggregator reports it.
    return DigestResult(index=index, ref=ref, error=e)
  return DigestResult(index=index, ref=ref, digest=digest)


def _work(channel:SimpleQueue[DigestResult], index:int, ref:str, algorithm:Algorithm, stdin:BinaryIO|None) -> None:
  channel.put(digest_ref(index, ref, algorithm, stdin=stdin))


def gather_results(refs:Sequence[str], algorithm:Algorithm, stdin:BinaryIO|None=None) -> Iterator[DigestResult]:
  '''
  Digest all `refs` concurrently, one thread per reference, and yield the results in input order.
  A result that completes early is held until all of its predecessors have been yielded.
  '''
  channel:SimpleQueue[DigestResult] = SimpleQueue()
  for index, ref in enumerate(refs):
    thread = Thread(target=_work, args=(channel, index, ref, algorithm, stdin), name=f'sri-{index}', daemon=True)
    thread.start()

  pending:dict[int,DigestResult] = {}
  next_index = 0
  for _ in range(len(refs)):
    result = channel.get()
    pending[result.index] = result
    while next_index in pending:
      yield pending.pop(next_index)
      next_index += 1
  assert not pending, pending


def run(refs:Sequence[str], algorithm:Algorithm, out:TextIO|None=None, err:TextIO|None=None, stdin:BinaryIO|None=None,
 prog:str='sri') -> bool:
  '''
  Digest `refs` and write one SRI line per successful input to `out`.
  Each failed input, and each failed write, produces one diagnostic line on `err`.
  A failure never stops the remaining inputs from being processed.
  Returns True only if every input was digested and every line was written.
  '''
  if not refs: raise ValueError('run requires at least one reference')
  if out is None: out = sys.stdout
  if err is None: err = sys.stderr
  include_suffix = len(refs) > 1
  ok = True
  for result in gather_results(refs, algorithm, stdin=stdin):
    if result.digest is None:
      write_diagnostic(err, prog, result.ref, result.error_msg)
      ok = False
      continue
    line = fmt_sri(algorithm.value, result.digest, result.ref, include_suffix)
    try:
      out.write(line)
      out.flush()
    except (OSError, ValueError) as e: # UnicodeEncodeError is a ValueError.
      write_error = WriteError(os_error_msg(e), ref=result.ref)
      write_diagnostic(err, prog, write_error.ref, write_error.msg)
      ok = False
  return ok
