# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import gzip
import socket
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from threading import Thread
from typing import Iterator

import pytest


BIG_BODY = bytes(range(256)) * 1024 # 256 KiB, several read chunks.

# Path -> (status, headers, body, delay in seconds).
routes:dict[str,tuple[int,dict[str,str],bytes,float]] = {
  '/abc': (200, {}, b'abc', 0),
  '/big': (200, {}, BIG_BODY, 0),
  '/slow': (200, {}, b'slow', 0.5),
  '/gzip': (200, {'Content-Encoding': 'gzip'}, gzip.compress(b'abc'), 0),
  '/no-content': (204, {}, b'', 0),
  '/created': (201, {}, b'abc', 0),
  '/redirect': (302, {'Location': '/abc'}, b'', 0),
  '/error': (500, {}, b'oops', 0),
  '/truncated': (200, {'Content-Length': '100'}, b'only ten!!', 0), # Declares more than it sends.
}


class _Handler(BaseHTTPRequestHandler):

  def do_GET(self) -> None:
    status, headers, body, delay = routes.get(self.path, (404, {}, b'not found', 0))
    if delay: time.sleep(delay)
    self.send_response(status)
    for k, v in headers.items():
      self.send_header(k, v)
    if status != HTTPStatus.NO_CONTENT and 'Content-Length' not in headers:
      self.send_header('Content-Length', str(len(body)))
    self.end_headers()
    if status != HTTPStatus.NO_CONTENT:
      self.wfile.write(body)

  def log_message(self, format:str, *args) -> None:
    pass


@pytest.fixture(scope='session')
def http_url() -> Iterator[str]:
  'Base URL of a local HTTP server serving `routes`.'
  server = ThreadingHTTPServer(('127.0.0.1', 0), _Handler)
  server.daemon_threads = True
  thread = Thread(target=server.serve_forever, name='test-http', daemon=True)
  thread.start()
  host, port = server.server_address[:2]
  yield f'http://{host}:{port}'
  server.shutdown()
  server.server_close()


@pytest.fixture
def closed_port_url() -> str:
  'A URL on a local port that nothing is listening on.'
  with socket.socket() as s:
    s.bind(('127.0.0.1', 0))
    port = s.getsockname()[1]
  return f'http://127.0.0.1:{port}/'


@pytest.fixture
def write_file(tmp_path):
  def _write_file(name:str, data:bytes) -> str:
    path = tmp_path / name
    path.write_bytes(data)
    return str(path)
  return _write_file
