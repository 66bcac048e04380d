# sockdemo

Small command-line demonstrations of process creation and socket
communication:

- **Child process**: start a program as a child process while the parent
  reports both process IDs.
- **TCP hello**: a server that accepts one connection, prints the client's
  greeting and sends its own back, with a matching client.
- **UDP hello**: the same exchange over datagrams.
- **TCP echo**: a server that echoes everything one client sends until the
  client shuts down its sending side, with a client that reports the bytes it
  sent and received.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Child process

```
sockdemo-fork
sockdemo-fork echo hello
```

With no arguments the command runs `/bin/ls -l`; otherwise the arguments are
the program to run and its arguments. The parent prints its own process ID
and the child's, then waits for the child to finish. If the program cannot
be started, `Exec failed: ...` is printed to standard error and the exit
status is 1.

### TCP hello

Start the server in one terminal. By default it listens on all interfaces,
port 8080:

```
sockdemo-tcp-server
```

In another terminal, run the client. By default it connects to
127.0.0.1:8080:

```
sockdemo-tcp-client
```

Both commands take `--host` and `--port`. The client sends
`Hello from client` and prints the server's reply; the client's host must be
an IPv4 address. The server prints what it received, replies
`Hello from server.` and exits.

### UDP hello

```
sockdemo-udp-server
sockdemo-udp-client
```

The same exchange over UDP port 8080, with the same `--host` and `--port`
options. The server answers `Hello from server`.

### TCP echo

```
sockdemo-echo-server
sockdemo-echo-client localhost
```

The echo server listens on port 27015 (`--host` and `--port` change this)
and serves one client, printing the size of each chunk it receives and sends
back. The client takes the server's name as its argument (and `--port`),
sends `this is a test`, shuts down its sending side and reads until the
server closes the connection, printing the byte counts.

## Library use

The modules can also be used from Python:

```python
import threading
from sockdemo import tcp_hello

listener = tcp_hello.open_listener("127.0.0.1", 0, 3)
port = listener.getsockname()[1]
server = threading.Thread(target=tcp_hello.serve_once, args=(listener, b"Hello from server"))
server.start()
reply = tcp_hello.request("127.0.0.1", port, b"Hello from client")
server.join()
listener.close()
```

- `tcp_hello.open_listener`, `tcp_hello.serve_once` and `tcp_hello.request`
  cover one TCP greeting exchange; `serve_once` returns what the client sent.
- `udp_hello.open_endpoint`, `udp_hello.serve_once` and `udp_hello.request`
  do the same over UDP; `request` takes an optional timeout and raises
  `TimeoutError` when no answer arrives.
- `echo.open_listener`, `echo.echo_connection`, `echo.serve_once` and
  `echo.exchange` make up the echo server and client. `exchange` returns an
  `ExchangeResult` with `bytes_sent`, the received `chunks` and their joined
  `data`, and raises `ConnectionError` when no address of the server accepts
  the connection.
- `forkexec.fork_and_exec(program, args)` starts a child process and returns
  its `subprocess.Popen` handle.

## Limits

Every server handles exactly one client (or one datagram) and then exits;
none of them serves clients concurrently or keeps running. The UDP client
waits for an answer without a timeout unless one is passed to
`udp_hello.request` from Python.