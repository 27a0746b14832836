"""TCP and UDP echo servers and clients."""

from __future__ import annotations

import argparse
import socket
import sys
import threading

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
TCP_SERVER_BUFFER = 100
TCP_CLIENT_BUFFER = 200
UDP_BUFFER = 1024


def handle_tcp_client(conn: socket.socket) -> bytes:
    """Read one message from ``conn``, echo it back and return it."""
    data = conn.recv(TCP_SERVER_BUFFER)
    print(f"Received from client: {data.decode('utf-8', errors='replace')}")
    conn.sendall(data)
    return data


def serve_tcp(host: str, port: int) -> None:
    """Echo one message on every accepted TCP connection, forever."""
    with socket.create_server((host, port)) as listener:
        print(f"Running on port {listener.getsockname()[1]}")
        while True:
            conn, _ = listener.accept()
            print("Connection established")
            with conn:
                handle_tcp_client(conn)


def tcp_client(host: str, port: int, message: str) -> str:
    """Send ``message`` to a TCP echo server and return its reply."""
    with socket.create_connection((host, port)) as stream:
        stream.sendall(message.encode("utf-8"))
        data = stream.recv(TCP_CLIENT_BUFFER)
    reply = data.decode("utf-8").rstrip("\0")
    print(f"Got echo back from server:{reply!r}")
    return reply


def udp_response(data: bytes) -> bytes:
    """Build the reply datagram for a received datagram."""
    return f"Received this: {data.decode('utf-8', errors='replace')}".encode("utf-8")


def _reply(sock: socket.socket, data: bytes, address) -> None:
    print(f"Received from client:{data.decode('utf-8', errors='replace')}")
    sock.sendto(udp_response(data), address)


def serve_udp(host: str, port: int) -> None:
    """Answer every datagram on a worker thread, forever."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        while True:
            try:
                data, address = sock.recvfrom(UDP_BUFFER)
            except OSError as exc:
                print(f"Error in receiving datagrams over UDP: {exc}")
                continue
            threading.Thread(
                target=_reply, args=(sock, data, address), daemon=True
            ).start()


def udp_client(host: str, port: int, message: str) -> tuple:
    """Send ``message`` as one datagram and return the peer address."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("0.0.0.0", 0))
        sock.connect((host, port))
        peer = sock.getpeername()
        print(f"socket peer addr is {peer}")
        sock.send(message.encode("utf-8"))
    return peer


def main(argv=None) -> int:
    """Run one of the echo servers or clients."""
    parser = argparse.ArgumentParser(prog="echo")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, host in (
        ("tcp-server", DEFAULT_HOST),
        ("tcp-client", "localhost"),
        ("udp-server", DEFAULT_HOST),
        ("udp-client", DEFAULT_HOST),
    ):
        sub = commands.add_parser(name)
        sub.add_argument("--host", default=host)
        sub.add_argument("--port", type=int, default=DEFAULT_PORT)
        if name == "tcp-client":
            sub.add_argument("--message", default="Hello from TCP client")
        elif name == "udp-client":
            sub.add_argument("--message", default="Hello: sent using send() call")
    args = parser.parse_args(argv)
    if args.command == "tcp-server":
        serve_tcp(args.host, args.port)
    elif args.command == "tcp-client":
        tcp_client(args.host, args.port, args.message)
    elif args.command == "udp-server":
        serve_udp(args.host, args.port)
    else:
        udp_client(args.host, args.port, args.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())