import threading

import pytest

from ftpp.singleton import Singleton


class MyClass:
    def __init__(self, value):
        self.value = value

    def print_message(self):
        return "Hello from MyClass"


def test_instance_before_instantiate_raises():
    holder = Singleton(MyClass)
    with pytest.raises(RuntimeError, match="Instance not yet created"):
        holder.instance()


def test_instantiate_then_instance():
    holder = Singleton(MyClass)
    holder.instantiate(42)
    obj = holder.instance()
    assert obj.value == 42
    assert obj.print_message() == "Hello from MyClass"
    assert holder.instance() is obj


def test_second_instantiate_raises_and_keeps_first():
    holder = Singleton(MyClass)
    holder.instantiate(42)
    with pytest.raises(RuntimeError, match="Instance already created"):
        holder.instantiate(100)
    assert holder.instance().value == 42


def test_keyword_arguments_are_forwarded():
    holder = Singleton(MyClass)
    holder.instantiate(value=7)
    assert holder.instance().value == 7


def test_builtin_type_instance():
    holder = Singleton(int)
    holder.instantiate(42)
    assert holder.instance() == 42


def test_concurrent_instantiate_creates_once():
    holder = Singleton(MyClass)
    successes = []
    failures = []
    lock = threading.Lock()

    def attempt(n):
        try:
            holder.instantiate(n)
        except RuntimeError:
            with lock:
                failures.append(n)
        else:
            with lock:
                successes.append(n)

    threads = [threading.Thread(target=attempt, args=(n,)) for n in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(successes) == 1
    assert len(failures) == 15
    assert holder.instance().value == successes[0]