"""A UDP server and client that exchange one datagram each."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

PORT = 8080
BUFSIZE = 1024
LOOPBACK = "127.0.0.1"
SERVER_HELLO = b"Hello from server"
CLIENT_HELLO = b"Hello from client"


def open_endpoint(host: str = "", port: int = PORT) -> socket.socket:
    """Return a UDP socket bound to *host*:*port*."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def serve_once(sock: socket.socket, reply: bytes = SERVER_HELLO) -> tuple[bytes, tuple]:
    """Wait for one datagram, answer its sender with *reply*.

    Returns the datagram and the sender's address.
    """
    data, client = sock.recvfrom(BUFSIZE)
    sock.sendto(reply, client)
    return data, client


def request(
    host: str = LOOPBACK,
    port: int = PORT,
    message: bytes = CLIENT_HELLO,
    timeout: float | None = None,
) -> bytes:
    """Send *message* to *host*:*port* and return the datagram sent back.

    With a *timeout*, raises TimeoutError when no answer arrives in time.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(timeout)
        sock.sendto(message, (host, port))
        data, _ = sock.recvfrom(BUFSIZE)
    return data


def _parser(prog: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=PORT)
    return parser


def server_main(argv: Sequence[str] | None = None) -> int:
    """Answer a single datagram and print what arrived."""
    options = _parser("udp-hello-server", "").parse_args(argv)
    try:
        with open_endpoint(options.host, options.port) as sock:
            data, _ = serve_once(sock)
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    print(f"Received from client: {data.decode(errors='replace')}")
    print("Hello message sent to client")
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Send a greeting datagram and print the server's answer."""
    options = _parser("udp-hello-client", LOOPBACK).parse_args(argv)
    try:
        reply = request(options.host, options.port, CLIENT_HELLO)
    except OSError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1
    print("Hello message sent")
    print(f"Server response: {reply.decode(errors='replace')}")
    return 0