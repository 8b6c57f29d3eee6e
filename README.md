# fastmatch

Building blocks for running matches between chess engines. The package needs only the standard library.

## Modules

- `fastmatch.timecontrol` provides `Limits` and `TimeControl`. `Limits` holds `increment`, `fixed_time`, `time`, `moves` and `timemargin`, all in milliseconds except `moves`. `TimeControl` tracks a player's clock from move to move. It handles moves-per-period controls, increments, a fixed time per move and a time margin. `update_time` returns `False` when the flag falls. `timeout_threshold` returns a `timedelta`. `str()` gives the usual notation, for example `40/60+0.1`, `1/move` or `-`. Both classes convert to and from dictionaries with `to_dict` and `from_dict`.
- `fastmatch.enums` defines `NotationType`, `OrderType`, `FormatType`, `VariantType` and `OutputType`.
- `fastmatch.game_pair` provides `GamePair`, which holds a `white` value and a `black` value and has a `swap` method.
- `fastmatch.strutils` has `starts_with`, `ends_with`, `contains`, `split_string`, `find_element` and `join`.
- `fastmatch.timefmt` has `datetime_now(fmt)`, `duration(seconds)`, which returns `HH:MM:SS`, and `datetime_precise()`, which returns `HH:MM:SS.micro`.
- `fastmatch.rand` has `random_uint64()` and a shared generator that you reach through `generator()` and reseed with `seed(value)`.
- `fastmatch.fd_limit` has `max_system_file_descriptor_count()`, `min_file_descriptor_required(concurrency)` and `max_concurrency(available_fds)`.

## Concurrency helpers

- `fastmatch.threadpool.ThreadPool` is a pool of worker threads. It has `enqueue`, `resize`, `kill`, `queue_size`, `stopped` and `num_threads`, and it works as a context manager.
- `fastmatch.thread_vector.ThreadVector` is a list protected by a lock. It has `push`, `remove` and `remove_if`. Use `with vec:` to hold the lock while you iterate.
- `fastmatch.lazy.Lazy` stores an initializer through `setup(...)` and runs it once, on the first call to `get()`.
- `fastmatch.scope` provides `ScopeEntry`, `ScopeGuard`, `CachedEntry` and `CachePool`. `CachePool.get_entry(identifier, factory)` lends out a free entry for that identifier, or creates a new one. A `ScopeGuard` gives the entry back when its `with` block ends.
- `fastmatch.file_writer.FileWriter` appends text to a file and keeps writes from different threads apart.

## CPU layout and pinning

- `fastmatch.cpuinfo.get_cpu_info()` returns a `CpuInfo` made of `PhysicalCpu`, `Core` and `Processor` objects. On Linux it reads this from `/proc/cpuinfo`, using `parse_proc_cpuinfo`. On other systems it uses `generic_cpu_info`.
- `fastmatch.affinity.set_affinity(cpus, pid)` pins a process to the given processors where the platform supports it. It returns `True` on success.
- `fastmatch.affinity_manager.AffinityManager` lends out `AffinityProcessor` entries through `consume()`. It uses one processor on each physical core before it uses any hyperthread siblings. When no processor is free it raises `RuntimeError`. Affinity is turned off when `tpe > 1`.

## Examples

```python
from fastmatch.timecontrol import Limits, TimeControl

tc = TimeControl(Limits(moves=40, time=60_000, increment=100))
print(tc)                    # 40/60+0.1
ok = tc.update_time(1_250)   # True; False once the flag falls
print(tc.time_left, tc.moves_left)   # 58950 39
```

```python
from fastmatch.fd_limit import max_concurrency, min_file_descriptor_required

min_file_descriptor_required(4)   # 62
max_concurrency(110)              # 8
```

## What this package does not do

The package does not play games. It has:

- no engine process handling;
- no tournament configuration objects;
- no record of finished games;
- no PGN or EPD writer;
- no logger;
- no command-line program.

It gives you the clock, scheduling and CPU-placement parts that such a program is built from.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```