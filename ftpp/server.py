"""A TCP server that accepts clients, routes their messages and replies."""

from __future__ import annotations

import socket
import sys
import threading
import time
from typing import Any, Callable, Iterable

from ftpp.message import Message, MessageType, deserialize_messages
from ftpp.observer import Observer
from ftpp.persistent_worker import PersistentWorker

_RECEIVE_SIZE = 4096
_BACKLOG = 10
_ACCEPT_BACKOFF = 0.05
_ACCEPT_TASK = "Accept Clients"


class Server:
    """Listens for clients in the background and handles their messages.

    New clients are accepted by a background task and numbered from 0.
    Incoming messages are read, and their actions run, by :meth:`update`.
    Actions receive the client id and the message.
    """

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._lock = threading.Lock()
        self._clients: dict[int, socket.socket] = {}
        self._observer = Observer()
        self._worker = PersistentWorker()
        self._next_id = 0

    @property
    def port(self) -> int | None:
        """The port the server listens on, or None before it is started."""
        if self._sock is None:
            return None
        return self._sock.getsockname()[1]

    @property
    def client_ids(self) -> tuple[int, ...]:
        """Ids of the connected clients, in increasing order."""
        with self._lock:
            return tuple(sorted(self._clients))

    def start(self, port: int) -> None:
        """Listen on ``port`` on every interface and begin accepting clients.

        Port 0 picks a free port, readable afterwards from :attr:`port`.
        Raises RuntimeError if the server is running or the socket cannot be
        set up.
        """
        if self._sock is not None:
            raise RuntimeError("Server already started")
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as error:
            raise RuntimeError("Failed to create socket") from error
        try:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as error:
                raise RuntimeError("Failed to set socket options") from error
            try:
                sock.bind(("", port))
            except OSError as error:
                raise RuntimeError("Bind failed") from error
            try:
                sock.listen(_BACKLOG)
            except OSError as error:
                raise RuntimeError("Listen failed") from error
            sock.setblocking(False)
        except RuntimeError:
            sock.close()
            raise
        self._sock = sock
        self._worker.add_task(_ACCEPT_TASK, self._accept_once)

    def stop(self) -> None:
        """Stop accepting, close every client connection and the listening socket."""
        if self._sock is None:
            return
        self._worker.remove_task(_ACCEPT_TASK)
        self._sock.close()
        self._sock = None
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()

    def define_action(
        self,
        message_type: int | MessageType,
        action: Callable[[int, Message], object],
    ) -> None:
        """Call ``action(client_id, message)`` for each message of ``message_type``."""
        self._observer.subscribe(MessageType(message_type), action)

    def send_to(self, message: Message, client_id: int) -> None:
        """Send ``message`` to one client.

        Raises KeyError for an unknown client and RuntimeError if sending fails.
        """
        with self._lock:
            client = self._clients.get(client_id)
            if client is None:
                raise KeyError("Client ID not found")
            try:
                client.sendall(message.serialized)
            except OSError as error:
                raise RuntimeError("Failed to send message to client") from error

    def send_to_array(self, message: Message, client_ids: Iterable[int]) -> None:
        """Send ``message`` to each listed client, reporting failures on stderr."""
        for client_id in client_ids:
            try:
                self.send_to(message, client_id)
            except (KeyError, RuntimeError) as error:
                print(
                    f"Failed to send to client ID: {client_id}({error})",
                    file=sys.stderr,
                )

    def send_to_all(self, message: Message) -> None:
        """Send ``message`` to every connected client, reporting failures on stderr."""
        data = message.serialized
        with self._lock:
            for client_id, client in self._clients.items():
                try:
                    client.sendall(data)
                except OSError:
                    print(
                        f"Failed to send to client ID: {client_id}"
                        "(Failed to send to client)",
                        file=sys.stderr,
                    )

    def update(self) -> None:
        """Read from every client and run the actions for their messages."""
        for client_id in self.client_ids:
            self._handle_client(client_id)

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()

    def _accept_once(self) -> None:
        listener = self._sock
        if listener is None:
            return
        try:
            client, _ = listener.accept()
        except BlockingIOError:
            time.sleep(_ACCEPT_BACKOFF)
            return
        except OSError as error:
            raise RuntimeError("Failed to accept client connection") from error
        try:
            client.setblocking(False)
        except OSError:
            client.close()
            print("Failed to setup client fd", file=sys.stderr)
            return
        with self._lock:
            client_id = self._next_id
            self._next_id += 1
            self._clients[client_id] = client

    def _handle_client(self, client_id: int) -> None:
        with self._lock:
            client = self._clients.get(client_id)
        if client is None:
            return
        try:
            data = client.recv(_RECEIVE_SIZE)
        except BlockingIOError:
            return
        except OSError as error:
            raise RuntimeError("Failed to receive data from client.") from error

        if not data:
            self._remove_client(client_id)
            return

        try:
            messages = deserialize_messages(data)
            for message in messages:
                self._observer.notify(message.type, client_id, message)
        except Exception as error:  # noqa: BLE001 - a bad message must not stop the server
            print(f"Error processing message: {error}", file=sys.stderr)

    def _remove_client(self, client_id: int) -> None:
        with self._lock:
            client = self._clients.pop(client_id, None)
        if client is None:
            raise RuntimeError("Client ID not found")
        client.close()