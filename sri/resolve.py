# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Resolve input references to readable binary streams.

A reference is one of:
* `-`: standard input.
* A URL beginning with `http://` or `https://`: the body of a GET response.
* Anything else: a local file path.

Every stream returned by `open_input` is owned by the caller, who must close it.
Closing the standard input stream does not close the process's standard input.
'''

import sys
from http import HTTPStatus
from io import RawIOBase
from typing import BinaryIO, cast, Iterator

import requests
from requests import Response

from .errors import HTTPStatusError, os_error_msg, ResolutionError


STDIN_REF = '-'

url_schemes = ('http://', 'https://')


def is_url(ref:str) -> bool:
  return ref.startswith(url_schemes)


def open_input(ref:str, stdin:BinaryIO|None=None) -> BinaryIO:
  '''
  Open `ref` for reading, raising ResolutionError if that is not possible.
  `stdin` substitutes for the process standard input when `ref` is `-`.
  '''
  if ref == STDIN_REF:
    return cast(BinaryIO, SharedReader(sys.stdin.buffer if stdin is None else stdin))
  if is_url(ref):
    return cast(BinaryIO, open_url(ref))
  try: return open(ref, 'rb')
  except OSError as e: raise ResolutionError(os_error_msg(e), ref=ref) from e


def open_url(url:str) -> 'ResponseReader':
  '''
  Issue a GET request for `url` and return a reader over the response body.
  Only `200 OK` is accepted; any other final status, including other 2xx codes, raises HTTPStatusError.
  '''
  try: response = requests.get(url, stream=True)
  except requests.RequestException as e: raise ResolutionError(str(e), ref=url) from e
  if response.status_code != HTTPStatus.OK:
    response.close()
    raise HTTPStatusError(f'HTTP error {fmt_status(response)}', ref=url, status_code=response.status_code)
  return ResponseReader(response)


def fmt_status(response:Response) -> str:
  'Format the status line of `response`, e.g. `404 Not Found`.'
  reason = response.reason
  if not reason:
    try: reason = HTTPStatus(response.status_code).phrase
    except ValueError: reason = ''
  return f'{response.status_code} {reason}'.rstrip()


class SharedReader(RawIOBase):
  '''
  A readable view of a stream that belongs to someone else, typically standard input.
  Closing the reader leaves the underlying stream open.
  '''

  def __init__(self, stream:BinaryIO) -> None:
    super().__init__()
    self.stream = stream

  def readable(self) -> bool: return True

  def readinto(self, buffer) -> int:
    return self.stream.readinto(buffer) # type: ignore[attr-defined]



class ResponseReader(RawIOBase):
  '''
  Adapts a streaming `requests.Response` to the binary file interface.
  The body is decoded according to its Content-Encoding, as a browser would see it.
  Closing the reader closes the response and releases its connection.
  '''

  def __init__(self, response:Response, chunk_size:int=1<<16) -> None:
    super().__init__()
    self.response = response
    self._chunks:Iterator[bytes] = response.iter_content(chunk_size=chunk_size)
    self._pending = b''


  def readable(self) -> bool: return True


  def readinto(self, buffer) -> int:
    while not self._pending:
      chunk = next(self._chunks, None)
      if chunk is None: return 0
      self._pending = chunk
    n = min(len(buffer), len(self._pending))
    buffer[:n] = self._pending[:n]
    self._pending = self._pending[n:]
    return n


  def close(self) -> None:
    if not self.closed:
      self.response.close()
    super().close()
