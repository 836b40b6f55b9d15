# sysexamples

A collection of small, self-contained systems programming examples:
producer/consumer threads over a bounded buffer, the dining philosophers,
a doubly linked list and a character list, process creation and reaping,
pipes, signals, Unix domain sockets, file I/O and a small TCP time server.

Each example is a plain Python module you can read, import and run. It
uses only the standard library. The process, signal and socket examples
need a POSIX system.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `sysexamples-list` | Runs the linked-list self checks and prints how many passed. |
| `sysexamples-hello` | Prints `Hello, George`. |
| `sysexamples-bounded-buffer` | Suppliers and consumers sharing a bounded buffer, logged at INFO level. |
| `sysexamples-diners` | The dining philosophers, with a monitor printing each diner's state. |
| `sysexamples-word-options` | Parses word-counting options; with `-p` prints them to stderr. |
| `sysexamples-sock-server SOCKET` | Unix domain socket server that answers each client with a greeting. |
| `sysexamples-sock-client SOCKET` | Connects to the server above, sends a greeting and prints the reply. |
| `sysexamples-dir-list [DIRECTORY]` | Prints the names in a directory, `/` by default. |
| `sysexamples-time-server PORT` | TCP server that sends each client the current time, with a load ticker every 5 seconds. |

### Bounded buffer

```
sysexamples-bounded-buffer --suppliers 2 --consumers 3 --sdelay 50 --cdelay 80 --gen 20 --bsize 10
```

Options are long options only (`--name VALUE` or `--name=VALUE`, unique
prefixes accepted); unknown options are reported on stderr and skipped.
`--help` prints the options and their defaults to stderr and exits.
Each supplier produces `--gen` entries; the consumers share the total out
evenly, and whatever is left in the buffer afterwards is drained by the
main thread.

### Dining philosophers

```
sysexamples-diners -n 5 -t 2 -e 3 -r
```

Set `DINING_POLICY=avoid_deadlock` in the environment to have diners pick
up their forks in a fixed global order, which rules out deadlock. Each
line of output shows one state character per diner: `t` thinking, `e`
eating, a fork number while waiting for that fork, and `d` when done.

### Word options

```
sysexamples-word-options -p -l 4 -w 200 -n 10 -s 2 -c -t
```

`-l`, `-w`, `-n` and `-s` take values; `-p`, `-c` and `-t` are flags. An
unknown option or a missing value is reported on stderr with exit status 1.

## Using the modules

```python
from sysexamples.linked_list import LinkedList
from sysexamples.charlist import CharList
from sysexamples.bounded_buffer import BoundedBuffer, Entry

items = LinkedList()
items.add(1)
items.add(2)
assert items.get(1) == 2 and len(items) == 2
items.remove(0)
assert list(items) == [2]

chars = CharList()
chars.add_string("C Programming")
assert str(chars) == "C Programming" and len(chars) == 13

bb = BoundedBuffer(4)
bb.put(Entry(7))
print(bb.describe())
assert bb.get().value == 7
```

- `sysexamples.linked_list`: `LinkedList` (values must be non-zero;
  bad indexes raise `IndexError`) and `run_self_checks()`.
- `sysexamples.charlist`: `CharList` with `add_char`, `add_string`,
  `print_chars`, `clear`, `len()`, iteration and `str()`.
- `sysexamples.bounded_buffer`: `BoundedBuffer` with blocking `put` and
  `get`, `describe()` and `close()`; `Entry`.
- `sysexamples.bb_options`: `BBOptions` and `parse_bb_options(argv)`.
- `sysexamples.bb_demo`: `supplier`, `consumer`, `consumer_quota` and
  `run(options)`, which returns the consumed and the left-over values.
- `sysexamples.diners`: `Fork`, `Diner`, `DiningPolicy` and
  `get_dining_policy(environ)`.
- `sysexamples.diner_demo`: `Configuration`, `parse_command_line(argv)`
  and `make_table(count, policy, rounds)`.
- `sysexamples.word_options`: `WordOptions`, `OptionError` and
  `parse_word_options(argv)`.
- `sysexamples.processes`: `fork_demo`, `pipe_value_demo`,
  `exec_pipeline_demo` (runs `echo` piped into `wc -l`), `sigchld_demo`
  and `reaper_demo`, together with `ChildRegistry` and `better_gets`.
- `sysexamples.domain_sock`: `client_connect`, `handle_connection` and
  `server_listen(path, max_connections)`.
- `sysexamples.file_demos`: `write_all`, `read_chunks`, `file_rw_demo`
  and `list_directory`.
- `sysexamples.time_server`: `handle_client`, `ticker` and
  `serve(port, max_connections)`.
- `sysexamples.millisleep`: `millisecond_sleep`, which raises
  `ValueError` for a negative duration.

## What this package does not do

- `sysexamples-word-options` only parses and reports its options; it does
  not count words or read any text.
- `sysexamples-diners` reports the `-n`, `-t`, `-e` and `-r` values it was
  given, but always seats five diners, and their think and eat times are
  short random delays of a few milliseconds regardless of `-t` and `-e`.
- The process examples in `sysexamples.processes` have no command of
  their own; call them from Python.