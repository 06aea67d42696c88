# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import hashlib
from enum import Enum
from typing import Any, Callable

from .errors import UnknownAlgorithmError


class Algorithm(Enum):
  '''
  The hash functions permitted in Subresource Integrity strings.
  The member value is the name used both on the command line and as the SRI prefix.
  '''
  sha256 = 'sha256'
  sha384 = 'sha384'
  sha512 = 'sha512'

  def __str__(self) -> str: return self.value


  @classmethod
  def from_name(cls, name:str) -> 'Algorithm':
    try: return cls(name)
    except ValueError: raise UnknownAlgorithmError(name) from None


  def new(self) -> Any:
    'Create a fresh hash object for this algorithm.'
    return _constructors[self]()


  @property
  def digest_size(self) -> int:
    return _digest_sizes[self]


DEFAULT_ALGORITHM = Algorithm.sha384

algorithm_names = tuple(a.value for a in Algorithm)


_constructors:dict[Algorithm,Callable[[],Any]] = {
  Algorithm.sha256 : hashlib.sha256,
  Algorithm.sha384 : hashlib.sha384,
  Algorithm.sha512 : hashlib.sha512,
}
assert set(_constructors) == set(Algorithm)

_digest_sizes = { a : c().digest_size for a, c in _constructors.items() }
