# ftpp

A toolbox of small building blocks for Python programs. It uses only the
standard library.

## What is inside

### Data structures

- `ftpp.data_buffer.DataBuffer` is a first-in, first-out byte buffer. The
  `write_int`, `write_size`, `write_float`, `write_double`, `write_char` and
  `write_string` methods append values in a fixed little-endian layout. The
  matching `read_*` methods consume them in the same order. Strings carry
  their byte length first. `write(fmt, *args)` and `read(fmt)` take any
  `struct` format. Every write returns the buffer, so calls can be chained.
  `bytes(buffer)` gives the raw contents and `len(buffer)` the number of bytes
  left. A read that needs more bytes than remain raises `BufferUnderflowError`,
  which is an `IndexError`.
- `ftpp.pool.Pool(factory)` keeps a count of reusable slots.
  - `resize(n)` grows the pool or shrinks it. It raises `ValueError` below the
    number of objects in use.
  - `acquire(*args, **kwargs)` takes a free slot, growing the pool by one if
    none is free. It builds the object with `factory(*args, **kwargs)` and
    returns it wrapped in a `PooledObject`.
  - The wrapped object is at `.value`. `release()`, or leaving a `with` block
    on the handle, returns it to the pool.
  - `len(pool)` is the total number of slots and `available()` the number of
    free ones.

### Design patterns

- `ftpp.memento.Memento` is an abstract base class. Subclasses implement
  `_save_to_snapshot` and `_load_from_snapshot`. `save()` returns a snapshot,
  which is a `DataBuffer`. `load(snapshot)` restores from it and leaves the
  snapshot unchanged.
- `ftpp.observer.Observer` maps events to callbacks. `subscribe(event, callback)`
  registers a callback. `notify(event, *args)` calls each callback for that
  event in subscription order.
- `ftpp.observable_value.ObservableValue` holds a value. Assigning a different
  value to `.value` calls every subscriber with the new value.
- `ftpp.singleton.Singleton(cls)` guards a single instance of `cls`.
  `instantiate(*args, **kwargs)` creates it once. `instance()` returns it. Both
  raise `RuntimeError` when used out of order.
- `ftpp.state_machine.StateMachine` has states, per-state actions and
  per-transition callbacks.
  - The first state added becomes `current_state`.
  - `update()` runs the current state's action. `transition_to(state)` runs
    the transition callback and then moves to `state`.
  - A missing action or transition raises `ValueError`. Using the machine
    before any state exists raises `RuntimeError`.

### Threading

- `ftpp.thread_safe_queue.ThreadSafeQueue` is a deque behind a lock. It has
  `push_back`, `push_front`, `pop_back` and `pop_front`. Popping an empty queue
  raises `EmptyQueueError`.
- `ftpp.thread_safe_iostream.ThreadSafeIOStream(output=None, input=None)`
  gives each thread its own line buffer and prefix.
  - `write(*args)` collects text for the calling thread.
  - `end_line()` writes the thread's prefix and line, whole, under a lock.
    `print(*args)` does both steps.
  - `read(convert=str)` reads the next whitespace-separated token.
  - Output and input default to `sys.stdout` and `sys.stdin`.
- `ftpp.thread.Thread(name, func, stream=None)` runs `func` on its own thread
  between `start()` and `stop()`.
  - `stop()` waits for `func` to finish.
  - With a stream, the thread's prefix on it is set to `"[name] "`.
  - `is_running` reports whether the thread has been started and not yet
    stopped.
- `ftpp.worker_pool.WorkerPool(num_threads=None)` starts worker threads that
  take jobs from a shared queue. By default there is one worker per CPU. A job
  is not used up when it runs: it goes back on the queue, so jobs run over and
  over until `close()` is called or the `with` block ends.
- `ftpp.persistent_worker.PersistentWorker` runs each named task repeatedly
  on its own `WorkerPool`. `remove_task(name)` stops one task and raises
  `KeyError` for an unknown name. `close()` stops them all.

### Networking

- `ftpp.message.Message(message_type)` is a typed message. The type is
  `MessageType.INT`, `MessageType.STRING` or `MessageType.DOUBLE`.
  - `write(value)` appends an `int`, `str` or `float` to match the type.
    String messages also accept `write_size` and `write_char`.
  - `read_int`, `read_string`, `read_double` and `read_float` return the
    payload.
  - A value of the wrong kind raises `MessageTypeError`.
  - `serialized` is the message's bytes, its type followed by its payload.
- `ftpp.message.deserialize_messages(data)` parses every message in a byte
  string. It skips unknown type fields.
- `ftpp.server.Server` listens on every interface.
  - `start(port)` begins listening. Port 0 picks a free port, readable from
    `port`.
  - A background task accepts clients and numbers them from 0. `client_ids`
    lists the connected clients.
  - `define_action(type, action)` registers an action. `update()` reads from
    each client and calls `action(client_id, message)`.
  - `send_to`, `send_to_array` and `send_to_all` send replies. `stop()`, or
    leaving a `with` block, closes everything.
- `ftpp.client.Client` connects with `connect(address, port)` and sends with
  `send(message)`. `update()` reads what the server has sent and calls the
  actions registered with `define_action(type, action)`. `update()` returns
  at once when nothing is waiting. It raises `RuntimeError` when the server
  has closed the connection.

### Time

- `ftpp.timer.Timer(duration_ms)` reports through `has_timed_out()` when the
  duration has passed since creation or the last `reset()`.
- `ftpp.chronometer.Chronometer` is a stopwatch. `start()`, `stop()` and
  `elapsed()` measure whole milliseconds.
- `ftpp.scheduler.Scheduler` runs tasks on a schedule.
  - `schedule_once(delay_ms, task)` runs a task once after a delay.
  - `schedule_repeating(name, interval_ms, task)` runs a task every interval
    until `cancel(name)`.
  - `close()`, or leaving a `with` block, waits for one-off tasks and stops
    repeating ones.
- `ftpp.logger.Logger(stream=None, min_level=LogLevel.DEBUG)` writes lines of
  the form `[YYYY-MM-DD HH:MM:SS] [LEVEL] message`. Messages below
  `min_level` are dropped. The levels are `DEBUG`, `INFO`, `WARNING` and
  `ERROR`.

### Mathematics

- `ftpp.ivector2.IVector2` and `ftpp.ivector3.IVector3` are vectors.
  - `+`, `-`, `*` and `/` work component by component, or with a number.
    Integer division truncates toward zero.
  - They also have `length()`, `normalize()`, `dot()` and `cross()`.
  - `IVector2` is immutable.
- `ftpp.random_2d_coordinate_generator.Random2DCoordinateGenerator(seed=42)`
  maps `(x, y)` to a number that depends only on the coordinates and the
  seed. It uses signed 64-bit wrap-around arithmetic.
- `ftpp.perlin_noise_2d.PerlinNoise2D(seed=42)` samples 2D Perlin noise in
  [-1, 1] with `sample(x, y)`. The same seed always gives the same noise.

## Example

```python
from ftpp.data_buffer import DataBuffer
from ftpp.observer import Observer
from ftpp.ivector2 import IVector2

buffer = DataBuffer()
buffer.write_int(42).write_string("Hello")
assert buffer.read_int() == 42
assert buffer.read_string() == "Hello"

observer = Observer()
observer.subscribe("ready", lambda: print("ready!"))
observer.notify("ready")

print(IVector2(3, 4).length())  # 5.0
```

## What it does not do

- There are no command-line programs. `Server` and `Client` are classes to use
  from your own code.
- Messages are not framed across reads. Each `update()` reads at most 4096
  bytes per connection and parses only what arrived in that read.

## Running the tests

```
pip install -e ".[test]"
pytest
```