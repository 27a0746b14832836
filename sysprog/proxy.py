"""A TCP proxy that relays one request and one response per connection."""

from __future__ import annotations

import socket
import sys
import threading

BUFFER_SIZE = 200


def parse_address(text: str) -> tuple[str, int]:
    """Parse ``host:port`` (or ``[v6-host]:port``) into a host and port."""
    host, sep, port_text = text.rpartition(":")
    if not sep or not host:
        raise ValueError(f"invalid socket address: {text!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in address: {text!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in address: {text!r}")
    return host, port


def handle_connection(
    proxy_stream: socket.socket, origin_stream: socket.socket
) -> tuple[bytes, bytes]:
    """Forward one request to the origin and its response back to the client.

    Returns the request and response bytes that were relayed.
    """
    try:
        request = proxy_stream.recv(BUFFER_SIZE)
    except OSError as exc:
        print(f"Error in reading from incoming proxy stream: {exc}")
        request = b""
    else:
        print(f"1: Incoming client request: {request.decode('utf-8', errors='replace')}")

    origin_stream.sendall(request)
    print("2: Forwarding request to origin server\n")
    response = origin_stream.recv(BUFFER_SIZE)
    print(
        "3: Received response from origin server: "
        f"{response.decode('utf-8', errors='replace')}"
    )
    proxy_stream.sendall(response)
    print("4: Forwarding response back to client")
    return request, response


def _relay(proxy_stream: socket.socket, origin_stream: socket.socket) -> None:
    with proxy_stream, origin_stream:
        handle_connection(proxy_stream, origin_stream)


def serve(proxy_address: str, origin_address: str) -> int:
    """Listen on ``proxy_address`` and relay each connection to ``origin_address``.

    Returns a non-zero status if the proxy cannot bind or the origin is unreachable.
    """
    try:
        listener = socket.create_server(parse_address(proxy_address))
    except (OSError, ValueError):
        print("Unable to bind to specified proxy port", file=sys.stderr)
        return 1
    with listener:
        try:
            origin = parse_address(origin_address)
            socket.create_connection(origin).close()
        except (OSError, ValueError):
            print("Please re-start the origin server")
            return 1
        host, port = listener.getsockname()[:2]
        print(f"Running on Addr:{host}, Port:{port}\n")
        while True:
            client, _ = listener.accept()
            try:
                origin_stream = socket.create_connection(origin)
            except OSError:
                client.close()
                print("Please re-start the origin server", file=sys.stderr)
                return 1
            threading.Thread(
                target=_relay, args=(client, origin_stream), daemon=True
            ).start()


def main(argv=None) -> int:
    """Start the proxy from ``proxy-from`` and ``proxy-to`` addresses."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Please provide proxy-from and proxy-to addresses", file=sys.stderr)
        return 2
    return serve(args[0], args[1])


if __name__ == "__main__":
    sys.exit(main())