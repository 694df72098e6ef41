"""Local HTTP server that sends its response body one byte at a time."""

from __future__ import annotations

import contextlib
import socket
import threading
import typing as typ

_HEADERS = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: application/json\r\n"
    b"Content-Length: %d\r\n"
    b"Connection: close\r\n"
    b"\r\n"
)


def _serve_once(
    listener: socket.socket, body: bytes, interval_s: float, stop: threading.Event
) -> None:
    try:
        conn, _ = listener.accept()
    except OSError:
        return
    with conn:
        conn.recv(65536)
        try:
            conn.sendall(_HEADERS % len(body))
            for byte in body:
                if stop.wait(interval_s):
                    return
                conn.sendall(bytes([byte]))
        except (BrokenPipeError, ConnectionResetError):
            return


@contextlib.contextmanager
def trickle_server(
    body: bytes, *, interval_s: float
) -> typ.Iterator[str]:
    """Serve ``body`` once, pausing ``interval_s`` before each byte.

    Yields the base URL of the server.
    """
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]
    stop = threading.Event()
    thread = threading.Thread(
        target=_serve_once, args=(listener, body, interval_s, stop), daemon=True
    )
    thread.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        stop.set()
        listener.close()
        thread.join(timeout=5)
