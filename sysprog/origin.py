"""A tiny HTTP origin server answering order-status requests."""

from __future__ import annotations

import argparse
import re
import socket
import sys
from dataclasses import dataclass
from typing import Optional

REQUEST_BUFFER_SIZE = 200
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")


@dataclass
class RequestLine:
    """The method, path and protocol of an HTTP request line."""

    method: Optional[str] = None
    path: Optional[str] = None
    protocol: Optional[str] = None

    def order_number(self) -> str:
        """Return the last ``/``-separated segment of the path."""
        return (self.path or "").split("/")[-1]


def parse_request_line(message: str) -> RequestLine:
    """Split a request line into up to three whitespace-separated parts."""
    tokens = [token for token in _ASCII_WHITESPACE.split(message) if token][:3]
    tokens += [None] * (3 - len(tokens))
    return RequestLine(*tokens)


def build_response(request_line: RequestLine) -> str:
    """Build the full HTTP response for a request line."""
    method = request_line.method or ""
    path = request_line.path or ""
    order_number = request_line.order_number()
    if method != "GET" or not path.startswith("/order/status") or not order_number:
        if not order_number:
            body = "Please provide valid order number"
        else:
            body = "Sorry,this page is not found"
        status = "404 Not Found"
    else:
        body = f"Order status for order number {order_number} is: Shipped\n"
        status = "200 OK"
    return (
        f"HTTP/1.1 {status}\nContent-Type: text/html\n"
        f"Content-Length:{len(body.encode('utf-8'))}\n\n{body}"
    )


def handle_request(data: bytes) -> bytes:
    """Answer the request whose first bytes are ``data``."""
    text = data[:REQUEST_BUFFER_SIZE].decode("utf-8", errors="replace")
    if text:
        first_line = text.split("\n", 1)[0].removesuffix("\r")
    else:
        print("Invalid request line received")
        first_line = ""
    return build_response(parse_request_line(first_line)).encode("utf-8")


def serve(host: str, port: int) -> None:
    """Accept connections forever, answering one request on each."""
    with socket.create_server((host, port)) as listener:
        print(f"Running on port: {listener.getsockname()[1]}")
        while True:
            conn, _ = listener.accept()
            with conn:
                response = handle_request(conn.recv(REQUEST_BUFFER_SIZE))
                print(
                    "\nGoing to respond to client with:\n\n"
                    + response.decode("utf-8")
                )
                conn.sendall(response)


def main(argv=None) -> int:
    """Start the origin server."""
    parser = argparse.ArgumentParser(prog="origin")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    serve(args.host, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())