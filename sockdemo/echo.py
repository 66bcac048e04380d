"""A TCP echo server and a client that sends one message and reads the echo."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

DEFAULT_PORT = 27015
BUFLEN = 512
DEFAULT_MESSAGE = b"this is a test"


@dataclass
class ExchangeResult:
    """What one client exchange sent and received."""

    bytes_sent: int
    chunks: list[bytes] = field(default_factory=list)

    @property
    def data(self) -> bytes:
        """All received bytes joined together."""
        return b"".join(self.chunks)


def open_listener(host: str | None = None, port: int = DEFAULT_PORT) -> socket.socket:
    """Return an IPv4 TCP socket listening on *host*:*port* (all interfaces if None)."""
    family, socktype, proto, _, address = socket.getaddrinfo(
        host, port, socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP, socket.AI_PASSIVE
    )[0]
    listener = socket.socket(family, socktype, proto)
    try:
        listener.bind(address)
        listener.listen(socket.SOMAXCONN)
    except OSError:
        listener.close()
        raise
    return listener


def echo_connection(conn: socket.socket, bufsize: int = BUFLEN) -> Iterator[bytes]:
    """Echo everything read from *conn* back to it until the peer stops sending.

    Yields each chunk after it has been sent back.
    """
    while chunk := conn.recv(bufsize):
        conn.sendall(chunk)
        yield chunk


def serve_once(listener: socket.socket) -> bytes:
    """Accept one client, echo until it stops sending, and return what it sent."""
    conn, _ = listener.accept()
    with conn:
        data = b"".join(echo_connection(conn))
        conn.shutdown(socket.SHUT_WR)
    return data


def _connect(server: str, port: int) -> socket.socket:
    for family, socktype, proto, _, address in socket.getaddrinfo(
        server, port, socket.AF_UNSPEC, socket.SOCK_STREAM, socket.IPPROTO_TCP
    ):
        sock = socket.socket(family, socktype, proto)
        try:
            sock.connect(address)
        except OSError:
            sock.close()
            continue
        return sock
    raise ConnectionError("Unable to connect to server!")


def exchange(
    server: str, port: int = DEFAULT_PORT, message: bytes = DEFAULT_MESSAGE
) -> ExchangeResult:
    """Send *message* to *server*, close the sending side, and read until the peer closes.

    Raises ConnectionError when no address of *server* accepts the connection.
    """
    with _connect(server, port) as sock:
        sock.sendall(message)
        result = ExchangeResult(bytes_sent=len(message))
        sock.shutdown(socket.SHUT_WR)
        while chunk := sock.recv(BUFLEN):
            result.chunks.append(chunk)
    return result


def server_main(argv: Sequence[str] | None = None) -> int:
    """Echo one client's data back to it, reporting each chunk."""
    parser = argparse.ArgumentParser(prog="echo-server")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    options = parser.parse_args(argv)
    try:
        with open_listener(options.host, options.port) as listener:
            conn, _ = listener.accept()
        with conn:
            for chunk in echo_connection(conn):
                print(f"Bytes received: {len(chunk)}")
                print(f"Bytes sent: {len(chunk)}")
            print("Connection closing...")
            conn.shutdown(socket.SHUT_WR)
    except OSError as exc:
        print(f"server failed with error: {exc}")
        return 1
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Send a test message to the named server and report the echo."""
    parser = argparse.ArgumentParser(prog="echo-client")
    parser.add_argument("server_name")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    options = parser.parse_args(argv)
    try:
        result = exchange(options.server_name, options.port, DEFAULT_MESSAGE)
    except OSError as exc:
        print(exc)
        return 1
    print(f"Bytes Sent: {result.bytes_sent}")
    for chunk in result.chunks:
        print(f"Bytes received: {len(chunk)}")
    print("Connection closed")
    return 0


if __name__ == "__main__":
    sys.exit(server_main())