"""A TCP server and client that exchange one greeting each."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

PORT = 8080
BUFSIZE = 1024
LOOPBACK = "127.0.0.1"
SERVER_HELLO = b"Hello from server."
CLIENT_HELLO = b"Hello from client"


def open_listener(host: str = "", port: int = PORT, backlog: int = 3) -> socket.socket:
    """Return a TCP socket bound to *host*:*port* and listening."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(backlog)
    except OSError:
        listener.close()
        raise
    return listener


def serve_once(listener: socket.socket, reply: bytes = SERVER_HELLO) -> bytes:
    """Accept one client, read its message, answer with *reply* and hang up.

    Returns the bytes the client sent.
    """
    conn, _ = listener.accept()
    with conn:
        data = conn.recv(BUFSIZE)
        conn.sendall(reply)
    return data


def request(host: str = LOOPBACK, port: int = PORT, message: bytes = CLIENT_HELLO) -> bytes:
    """Send *message* to the server at *host*:*port* and return its reply.

    Raises ValueError for a host that is not an IPv4 address and OSError
    when the connection fails.
    """
    try:
        socket.inet_pton(socket.AF_INET, host)
    except OSError:
        raise ValueError("Invalid address/ Address not supported") from None
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as client:
        client.connect((host, port))
        client.sendall(message)
        return client.recv(BUFSIZE)


def _parser(prog: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=PORT)
    return parser


def server_main(argv: Sequence[str] | None = None) -> int:
    """Serve a single client and print what it sent."""
    options = _parser("tcp-hello-server", "").parse_args(argv)
    try:
        with open_listener(options.host, options.port) as listener:
            data = serve_once(listener)
    except OSError as exc:
        print(f"server failed: {exc}", file=sys.stderr)
        return 1
    print(data.decode(errors="replace"))
    print("Hello message sent")
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Greet the server and print its reply."""
    options = _parser("tcp-hello-client", LOOPBACK).parse_args(argv)
    try:
        reply = request(options.host, options.port, CLIENT_HELLO)
    except ValueError as exc:
        print(exc)
        return 1
    except OSError:
        print("Connection Failed")
        return 1
    print("Hello message sent")
    print(reply.decode(errors="replace"))
    return 0