import os
import sys
import json
from http.server import BaseHTTPRequestHandler

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env'))

# Add the backend directory to Python path so songs_store imports on Vercel
current_dir = os.path.dirname(os.path.abspath(__file__))
backend_dir = os.path.dirname(current_dir)
sys.path.insert(0, backend_dir)

from songs_store.config import StoreConfig
from songs_store.proxy import SongsProxy, CORS_HEADERS

_proxy = None


def get_proxy() -> SongsProxy:
    """Build the proxy once per process so a created document id is reused."""
    global _proxy
    if _proxy is None:
        _proxy = SongsProxy(StoreConfig.from_env())
    return _proxy


class handler(BaseHTTPRequestHandler):
    def _read_body(self):
        content_length = int(self.headers.get('Content-Length', 0))
        # rfile.read() with a negative size would block until the client hangs up
        if content_length <= 0:
            return None
        return self.rfile.read(content_length).decode('utf-8')

    def _dispatch(self, method):
        try:
            body = self._read_body() if method == 'PUT' else None
            result = get_proxy().handle(method, body)
            payload = result.body()

            self.send_response(result.status)
            for name, value in result.headers.items():
                self.send_header(name, value)
            self.send_header('Content-Length', str(len(payload)))
            self.end_headers()
            if method != 'HEAD':
                self.wfile.write(payload)
        except Exception as e:
            print(f"[songs] Unhandled error: {str(e)}")
            payload = json.dumps({'error': str(e) or 'Internal Error'}).encode()
            self.send_response(500)
            for name, value in CORS_HEADERS.items():
                self.send_header(name, value)
            self.send_header('Content-Type', 'application/json')
            self.send_header('Content-Length', str(len(payload)))
            self.end_headers()
            if method != 'HEAD':
                self.wfile.write(payload)

    def __getattr__(self, name):
        # http.server looks up do_<COMMAND>; any method without its own
        # do_* gets routed to the proxy, which answers 405
        if name.startswith('do_') and len(name) > 3:
            return lambda: self._dispatch(name[3:])
        raise AttributeError(name)

    def do_OPTIONS(self):  # noqa: N802
        """Handle CORS preflight requests"""
        self._dispatch('OPTIONS')

    def do_GET(self):  # noqa: N802
        self._dispatch('GET')

    def do_PUT(self):  # noqa: N802
        """Overwrite the stored songs list with the request body (JSON)."""
        self._dispatch('PUT')

    def do_HEAD(self):  # noqa: N802
        """Answers 405 like every other method; headers only."""
        self._dispatch('HEAD')
