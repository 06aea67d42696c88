# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
sri computes cryptographic hashes of files, standard input, and HTTP URLs,
formatted as Subresource Integrity strings, e.g. `sha384-<base64 digest>`.
'''

from .algorithm import Algorithm, DEFAULT_ALGORITHM
from .digest import digest_bytes, digest_stream
from .dispatch import DigestResult, gather_results, run
from .errors import HTTPStatusError, ReadError, ResolutionError, SriError, StartupConfigError, UnknownAlgorithmError, WriteError
from .format import fmt_sri
from .resolve import open_input
