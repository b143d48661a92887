import socket
import time

import pytest

from ftpp.client import Client
from ftpp.message import Message, MessageType, deserialize_messages

TIMEOUT = 5.0


def _recv_exact(sock, size):
    sock.settimeout(TIMEOUT)
    chunks = b""
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            break
        chunks += chunk
    return chunks


def _update_until(client, predicate):
    deadline = time.monotonic() + TIMEOUT
    while time.monotonic() < deadline:
        client.update()
        if predicate():
            return
        time.sleep(0.01)
    raise AssertionError("condition not reached in time")


@pytest.fixture
def listener():
    sock = socket.create_server(("127.0.0.1", 0))
    yield sock
    sock.close()


@pytest.fixture
def session(listener):
    client = Client()
    client.connect("127.0.0.1", listener.getsockname()[1])
    conn, _ = listener.accept()
    yield client, conn
    conn.close()
    if client.connected:
        client.disconnect()


def test_disconnect_without_connection_raises():
    with pytest.raises(RuntimeError, match="Not connected"):
        Client().disconnect()


def test_send_without_connection_raises():
    with pytest.raises(RuntimeError, match="not connected"):
        Client().send(Message(1).write(42))


def test_update_without_connection_raises():
    with pytest.raises(RuntimeError, match="Not connected"):
        Client().update()


def test_connect_to_closed_port_raises():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = Client()
    with pytest.raises(RuntimeError, match="Failed to connect"):
        client.connect("127.0.0.1", port)
    assert client.connected is False


def test_connect_twice_raises(session, listener):
    client, _ = session
    assert client.connected is True
    with pytest.raises(RuntimeError, match="Already connected"):
        client.connect("127.0.0.1", listener.getsockname()[1])


def test_send_int_reaches_server(session):
    client, conn = session
    message = Message(1).write(42)
    client.send(message)
    data = _recv_exact(conn, len(message.serialized))
    assert data == message.serialized
    assert deserialize_messages(data)[0].read_int() == 42


def test_send_string_built_from_chars(session):
    client, conn = session
    message = Message(2).write_size(5)
    for char in "Hello":
        message.write_char(char)
    client.send(message)
    data = _recv_exact(conn, len(message.serialized))
    assert deserialize_messages(data)[0].read_string() == "Hello"


def test_update_runs_action_for_received_double(session):
    client, conn = session
    received = []
    client.define_action(3, lambda msg: received.append(msg.read_double()))
    client.define_action(MessageType.STRING, lambda msg: received.append(msg.read_string()))
    conn.sendall(Message(3).write(84.0).serialized)
    _update_until(client, lambda: received)
    assert received == [84.0]


def test_update_without_data_runs_nothing(session):
    client, _ = session
    received = []
    client.define_action(1, received.append)
    client.update()
    assert received == []


def test_invalid_data_is_reported(session, capsys):
    client, conn = session
    conn.sendall(b"\x00\x00\x00\x00")
    errors = []

    def reported():
        errors.append(capsys.readouterr().err)
        return "Couldn't deserialize any messages" in "".join(errors)

    _update_until(client, reported)
    assert "Error processing message" in "".join(errors)
    assert client.connected is True


def test_server_closing_disconnects_client(session):
    client, conn = session
    conn.close()
    deadline = time.monotonic() + TIMEOUT
    with pytest.raises(RuntimeError, match="Server disconnected"):
        while time.monotonic() < deadline:
            client.update()
            time.sleep(0.01)
    assert client.connected is False


def test_context_manager_disconnects(listener):
    with Client() as client:
        client.connect("127.0.0.1", listener.getsockname()[1])
        assert client.connected is True
    assert client.connected is False