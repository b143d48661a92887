"""A TCP client that sends messages and dispatches the ones it receives."""

from __future__ import annotations

import socket
import sys
from typing import Any, Callable

from ftpp.message import Message, MessageType, deserialize_messages
from ftpp.observer import Observer

_RECEIVE_SIZE = 4096


class Client:
    """Connects to a server, sends messages and runs actions for incoming ones.

    Actions are registered per message type with :meth:`define_action` and
    are called from :meth:`update`, which reads what the server has sent.
    """

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._observer = Observer()

    @property
    def connected(self) -> bool:
        """True while a connection to a server is open."""
        return self._sock is not None

    def connect(self, address: str, port: int) -> None:
        """Connect to ``address`` on ``port``, trying each resolved address.

        Raises RuntimeError if already connected, if the address cannot be
        resolved or if no resolved address accepts the connection.
        """
        if self._sock is not None:
            raise RuntimeError("Already connected.")
        try:
            candidates = socket.getaddrinfo(
                address, str(port), socket.AF_UNSPEC, socket.SOCK_STREAM
            )
        except socket.gaierror as error:
            raise RuntimeError(f"getaddrinfo error: {error}") from error

        for family, kind, proto, _, sockaddr in candidates:
            try:
                sock = socket.socket(family, kind, proto)
            except OSError:
                continue
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                sock.connect(sockaddr)
            except OSError:
                sock.close()
                continue
            break
        else:
            raise RuntimeError(
                "Failed to connect to the server. Make sure the server is running."
            )

        sock.setblocking(False)
        self._sock = sock
        print(f"Connected to {address} on port {port}.")

    def disconnect(self) -> None:
        """Close the connection; RuntimeError if not connected."""
        if self._sock is None:
            raise RuntimeError("Not connected.")
        self._sock.close()
        self._sock = None
        print("Disconnected successfully.")

    def define_action(
        self, message_type: int | MessageType, action: Callable[[Message], object]
    ) -> None:
        """Call ``action`` with every received message of ``message_type``."""
        self._observer.subscribe(MessageType(message_type), action)

    def send(self, message: Message) -> None:
        """Send ``message`` to the server."""
        if self._sock is None:
            raise RuntimeError("send(). Server is not connected")
        try:
            self._sock.sendall(message.serialized)
        except OSError as error:
            raise RuntimeError("Failed to send message") from error

    def update(self) -> None:
        """Read what the server has sent and run the matching actions.

        Returns at once when nothing is waiting. Raises RuntimeError when not
        connected, when reading fails, or when the server has closed the
        connection, in which case the client is disconnected first.
        """
        if self._sock is None:
            raise RuntimeError("update(). Not connected to a server.")
        try:
            data = self._sock.recv(_RECEIVE_SIZE)
        except BlockingIOError:
            return
        except OSError as error:
            raise RuntimeError("Failed to receive data from server.") from error

        if not data:
            self.disconnect()
            raise RuntimeError("Server disconnected from client.")

        try:
            messages = deserialize_messages(data)
            for message in messages:
                self._observer.notify(message.type, message)
        except Exception as error:  # noqa: BLE001 - a bad message must not stop the client
            print(f"Error processing message: {error}", file=sys.stderr)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        if self._sock is not None:
            self.disconnect()