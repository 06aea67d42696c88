# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import pytest

from sri.algorithm import Algorithm, algorithm_names, DEFAULT_ALGORITHM
from sri.errors import StartupConfigError, UnknownAlgorithmError


def test_names() -> None:
  assert algorithm_names == ('sha256', 'sha384', 'sha512')
  assert DEFAULT_ALGORITHM is Algorithm.sha384


@pytest.mark.parametrize('name, size', [('sha256', 32), ('sha384', 48), ('sha512', 64)])
def test_from_name(name:str, size:int) -> None:
  a = Algorithm.from_name(name)
  assert a.value == name
  assert str(a) == name
  assert a.digest_size == size
  assert a.new().digest_size == size


@pytest.mark.parametrize('name', ['md5', 'sha1', 'SHA256', 'sha-256', ''])
def test_unknown(name:str) -> None:
  with pytest.raises(UnknownAlgorithmError) as info:
    Algorithm.from_name(name)
  assert info.value.name == name
  assert isinstance(info.value, StartupConfigError)
  assert info.value.msg == f'unknown hash function: {name}'


def test_new_is_fresh() -> None:
  h1 = Algorithm.sha256.new()
  h1.update(b'x')
  h2 = Algorithm.sha256.new()
  assert h1.digest() != h2.digest()
