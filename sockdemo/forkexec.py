"""Start a child program next to the current process and report both PIDs."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence

DEFAULT_COMMAND = ("/bin/ls", "-l")


def fork_and_exec(program: str, args: Sequence[str]) -> subprocess.Popen:
    """Start *program* with *args* as a child process and return its handle.

    Raises OSError when the program cannot be started.
    """
    return subprocess.Popen([program, *args])


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command (``/bin/ls -l`` by default) as a child and report PIDs."""
    command = list(sys.argv[1:] if argv is None else argv) or list(DEFAULT_COMMAND)
    program, *args = command
    try:
        child = fork_and_exec(program, args)
    except OSError as exc:
        print(f"Exec failed: {exc}", file=sys.stderr)
        return 1

    print("Parent process executing...")
    print(f"Parent process ID: {os.getpid()}")
    print(f"Child process ID: {child.pid}", flush=True)
    child.wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())