import pytest

from ftpp.data_buffer import BufferUnderflowError, DataBuffer
from ftpp.memento import Memento


class Sample(Memento):
    def __init__(self):
        self.x = 0
        self.y = ""

    def _save_to_snapshot(self, snapshot):
        snapshot.write_int(self.x).write_string(self.y)

    def _load_from_snapshot(self, snapshot):
        self.x = snapshot.read_int()
        self.y = snapshot.read_string()


def test_save_modify_restore():
    obj = Sample()
    obj.x = 42
    obj.y = "Hello"
    saved = obj.save()
    assert bytes(saved) == (
        (42).to_bytes(4, "little", signed=True) + (5).to_bytes(8, "little") + b"Hello"
    )
    expected = DataBuffer()
    expected.write_int(42).write_string("Hello")
    assert bytes(saved) == bytes(expected)

    obj.x = 100
    obj.y = "World"
    assert (obj.x, obj.y) == (100, "World")

    obj.load(saved)
    assert (obj.x, obj.y) == (42, "Hello")


def test_snapshot_can_be_loaded_twice():
    snapshot = DataBuffer()
    snapshot.write_int(7).write_string("seven")
    assert len(snapshot) == 17

    obj = Sample()
    obj.load(snapshot)
    assert (obj.x, obj.y) == (7, "seven")
    obj.x = 0
    obj.y = ""
    obj.load(snapshot)
    assert obj.x == 7
    assert obj.y == "seven"
    assert len(snapshot) == 17


def test_load_from_empty_snapshot_raises():
    obj = Sample()
    with pytest.raises(BufferUnderflowError):
        obj.load(DataBuffer())


def test_memento_is_abstract():
    with pytest.raises(TypeError):
        Memento()