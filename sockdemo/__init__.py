"""Process and socket demonstrations: child processes, TCP/UDP hello and TCP echo."""

__version__ = "0.1.0"
__all__ = ["forkexec", "tcp_hello", "udp_hello", "echo"]