"""Shared test fixtures."""

import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

STUB_RATES = {"USD": "0.92", "CHF": "1.05\n"}
SLOW_DELAY = 1.0
TRICKLE_INTERVAL = 0.2
CLIENT_TIMEOUT = 0.3


class StubRateHandler(BaseHTTPRequestHandler):
    """Rate provider stand-in.

    /currencies/USD, /currencies/CHF -> numeric body
    /currencies/GBP                  -> non-numeric body
    /currencies/RON                  -> numeric body after SLOW_DELAY
    /currencies/HUF                  -> non-numeric body after SLOW_DELAY
    /currencies/SEK                  -> numeric body, one byte per TRICKLE_INTERVAL
    /currencies/NOK                  -> numeric body of 1000 digits
    /currencies/JPY                  -> HTTP 503
    anything else                    -> HTTP 404
    """

    def do_GET(self):
        code = self.path.rsplit("/", 1)[-1]
        if not self.path.startswith("/currencies/"):
            self._reply(404, "Not found")
        elif code in STUB_RATES:
            self._reply(200, STUB_RATES[code])
        elif code == "GBP":
            self._reply(200, "Wrong response, definitely not a number!")
        elif code == "RON":
            time.sleep(SLOW_DELAY)
            self._reply(200, "0.20")
        elif code == "HUF":
            time.sleep(SLOW_DELAY)
            self._reply(200, "Wrong response, definitely not a number!")
        elif code == "SEK":
            self._trickle("0.09200000")
        elif code == "NOK":
            self._reply(200, "1" * 1000)
        elif code == "JPY":
            self._reply(503, "Service unavailable")
        else:
            self._reply(404, "Unknown currency")

    def _reply(self, status: int, body: str) -> None:
        data = body.encode("utf-8")
        try:
            self.send_response(status)
            self.send_header("Content-Type", "text/plain")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)
        except (BrokenPipeError, ConnectionResetError):
            # Client gave up (timeout tests).
            pass

    def _trickle(self, body: str) -> None:
        data = body.encode("utf-8")
        try:
            self.send_response(200)
            self.send_header("Content-Type", "text/plain")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.flush()
            for i in range(len(data)):
                self.wfile.write(data[i : i + 1])
                self.wfile.flush()
                time.sleep(TRICKLE_INTERVAL)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass


@pytest.fixture
def rate_server():
    """Serve StubRateHandler on a free local port; yields the base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), StubRateHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def dead_url():
    """A base URL nothing is listening on."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), StubRateHandler)
    host, port = server.server_address[:2]
    server.server_close()
    return f"http://{host}:{port}"
