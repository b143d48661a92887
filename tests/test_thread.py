import io
import threading

from ftpp.thread import Thread
from ftpp.thread_safe_iostream import ThreadSafeIOStream


def test_two_named_threads_print_prefixed_lines():
    out = io.StringIO()
    stream = ThreadSafeIOStream(output=out)

    def function1():
        for i in range(5):
            stream.write("Hello from Function1, iteration ", i).end_line()

    def function2():
        for i in range(5):
            stream.write("Hello from Function2, iteration ", i).end_line()

    thread1 = Thread("Thread1", function1, stream)
    thread2 = Thread("Thread2", function2, stream)
    thread1.start()
    thread2.start()
    thread1.stop()
    thread2.stop()

    lines = out.getvalue().splitlines()
    assert len(lines) == 10
    assert [line for line in lines if line.startswith("[Thread1] ")] == [
        f"[Thread1] Hello from Function1, iteration {i}" for i in range(5)
    ]
    assert [line for line in lines if line.startswith("[Thread2] ")] == [
        f"[Thread2] Hello from Function2, iteration {i}" for i in range(5)
    ]


def test_is_running_follows_start_and_stop():
    gate = threading.Event()
    thread = Thread("Worker", gate.wait)
    assert thread.is_running is False
    thread.start()
    assert thread.is_running is True
    gate.set()
    thread.stop()
    assert thread.is_running is False


def test_start_twice_runs_once():
    calls = []
    gate = threading.Event()

    def work():
        gate.wait()
        calls.append(1)

    thread = Thread("Once", work)
    thread.start()
    thread.start()
    assert thread.is_running is True
    gate.set()
    thread.stop()
    assert thread.is_running is False
    assert calls == [1]


def test_stop_without_start_is_harmless():
    calls = []
    thread = Thread("Idle", lambda: calls.append(1))
    thread.stop()
    assert thread.is_running is False
    assert calls == []


def test_restart_after_stop_runs_again():
    calls = []
    thread = Thread("Again", lambda: calls.append(1))
    thread.start()
    thread.stop()
    thread.start()
    thread.stop()
    assert calls == [1, 1]


def test_runs_under_its_name():
    seen = []
    thread = Thread("Named", lambda: seen.append(threading.current_thread().name))
    thread.start()
    thread.stop()
    assert seen == ["Named"]
    assert thread.name == "Named"