# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from base64 import standard_b64encode


def fmt_sri(algorithm_name:str, digest:bytes, ref:str, include_suffix:bool) -> str:
  '''
  Format a digest as a Subresource Integrity line: `algorithm-base64digest`,
  followed by a tab and `ref` if `include_suffix` is set, and always a newline.
  The base64 is the standard padded alphabet; SRI does not accept the URL-safe variant.
  '''
  b64 = standard_b64encode(digest).decode('ascii')
  if include_suffix: return f'{algorithm_name}-{b64}\t{ref}\n'
  return f'{algorithm_name}-{b64}\n'
