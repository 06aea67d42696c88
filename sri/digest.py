# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import BinaryIO

from .algorithm import Algorithm
from .errors import os_error_msg, ReadError


CHUNK_SIZE = 1 << 16
#^ A quick timing experiment suggested that chunk sizes larger than this are not faster.


def digest_stream(stream:BinaryIO, algorithm:Algorithm, chunk_size:int=CHUNK_SIZE, ref:str='') -> bytes:
  '''
  Hash the remaining contents of `stream` and return the binary digest.
  The stream is read in chunks of at most `chunk_size` bytes and is always closed, even on failure.
  Read failures raise ReadError; no partial digest is ever returned.
  '''
  h = algorithm.new()
  try:
    with stream:
      while chunk := stream.read(chunk_size):
        h.update(chunk)
  except OSError as e:
    raise ReadError(os_error_msg(e), ref=ref) from e
  return h.digest()


def digest_bytes(data:bytes, algorithm:Algorithm) -> bytes:
  h = algorithm.new()
  h.update(data)
  return h.digest()
