# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for sri.
Per-input errors carry the reference that failed so that the aggregator can report them.
'''


class SriError(Exception):
  'Base class for all sri errors.'

  def __init__(self, msg:str, ref:str='') -> None:
    super().__init__(msg)
    self.msg = msg
    self.ref = ref


class StartupConfigError(SriError):
  'Fatal configuration error, detected before any input is read.'


class UnknownAlgorithmError(StartupConfigError):

  def __init__(self, name:str) -> None:
    super().__init__(f'unknown hash function: {name}')
    self.name = name


class ResolutionError(SriError):
  'The reference could not be opened: missing file, unreachable host, etc.'


class HTTPStatusError(ResolutionError):
  'The server responded with a status other than 200 OK.'

  def __init__(self, msg:str, ref:str='', status_code:int=-1) -> None:
    super().__init__(msg, ref=ref)
    self.status_code = status_code


class ReadError(SriError):
  'Reading the input failed partway through.'


class WriteError(SriError):
  'Writing a result line to the output failed.'


def os_error_msg(e:Exception) -> str:
  'The human readable description of an error; for an OSError, without the errno and filename decorations.'
  return getattr(e, 'strerror', None) or str(e) or type(e).__name__
