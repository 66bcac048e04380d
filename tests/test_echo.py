import socket
import threading
import time

import pytest

from sockdemo.echo import (
    DEFAULT_MESSAGE,
    ExchangeResult,
    client_main,
    echo_connection,
    exchange,
    open_listener,
    serve_once,
    server_main,
)


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _serve_in_thread(listener):
    received = []
    thread = threading.Thread(target=lambda: received.append(serve_once(listener)))
    thread.start()
    return thread, received


def test_exchange_receives_its_own_message_back():
    with open_listener("127.0.0.1", 0) as listener:
        port = listener.getsockname()[1]
        thread, received = _serve_in_thread(listener)
        result = exchange("127.0.0.1", port, DEFAULT_MESSAGE)
        thread.join(5)
    assert result.data == b"this is a test"
    assert result.bytes_sent == len(DEFAULT_MESSAGE)
    assert received == [DEFAULT_MESSAGE]


def test_exchange_large_message_round_trip():
    message = bytes(range(256)) * 10
    with open_listener("127.0.0.1", 0) as listener:
        port = listener.getsockname()[1]
        thread, received = _serve_in_thread(listener)
        result = exchange("127.0.0.1", port, message)
        thread.join(5)
    assert result.data == message
    assert all(len(chunk) <= 512 for chunk in result.chunks)
    assert received == [message]


def test_exchange_result_data_joins_chunks():
    result = ExchangeResult(bytes_sent=3, chunks=[b"ab", b"c"])
    assert result.data == b"abc"


def test_echo_connection_yields_bounded_chunks():
    left, right = socket.socketpair()
    with left, right:
        message = b"echo me please"
        left.sendall(message)
        left.shutdown(socket.SHUT_WR)
        chunks = list(echo_connection(right, 4))
        right.shutdown(socket.SHUT_WR)
        echoed = b""
        while part := left.recv(1024):
            echoed += part
    assert b"".join(chunks) == message
    assert all(len(chunk) <= 4 for chunk in chunks)
    assert echoed == message


def test_exchange_unreachable_server_raises():
    with pytest.raises(ConnectionError):
        exchange("127.0.0.1", _free_port(), DEFAULT_MESSAGE)


def test_client_main_requires_server_name():
    with pytest.raises(SystemExit):
        client_main([])


def test_client_main_reports_bytes(capsys):
    with open_listener("127.0.0.1", 0) as listener:
        port = listener.getsockname()[1]
        thread, _ = _serve_in_thread(listener)
        code = client_main(["127.0.0.1", "--port", str(port)])
        thread.join(5)
    out = capsys.readouterr().out
    assert code == 0
    assert f"Bytes Sent: {len(DEFAULT_MESSAGE)}\n" in out
    assert out.endswith("Connection closed\n")


def test_client_main_unreachable_returns_error(capsys):
    code = client_main(["127.0.0.1", "--port", str(_free_port())])
    assert code == 1
    assert "Unable to connect to server!" in capsys.readouterr().out


def test_server_main_echoes_one_client(capsys):
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(server_main(["--host", "127.0.0.1", "--port", str(port)]))
    )
    thread.start()
    result = None
    for _ in range(100):
        try:
            result = exchange("127.0.0.1", port, DEFAULT_MESSAGE)
            break
        except ConnectionError:
            time.sleep(0.05)
    thread.join(5)
    assert result is not None and result.data == DEFAULT_MESSAGE
    assert results == [0]
    out = capsys.readouterr().out
    assert "Connection closing...\n" in out