# miniapps

Four small console programs in one package. It needs only the Python
standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## HTTP benchmark

This command sends plain HTTP/1.1 `GET` requests to a server from several
threads at once. Each request opens a new connection with `Connection: close`
and reads the whole response. At the end it prints how many requests succeeded
and how many failed, the total time, requests per second, the average, minimum
and maximum response time, the 90th percentile and the average response size.
A request succeeds when the connection works and the server sends back at least
one byte. The HTTP status code is not checked.

```
miniapps-benchmark [OPTIONS] HOST PORT
```

Options:

- `-p PATH`: path to request (default `/`)
- `-t N`: number of threads (default 10)
- `-r N`: requests per thread (default 10)
- `-w`: warm-up: each thread first sends one request that is left out of the results
- `-q`: quiet: no log line for each request
- `-h`: print usage and exit

Thread and request counts must be greater than 0. If HOST or PORT is missing,
the command prints an error and the usage text and exits with status 1.

Example:

```
miniapps-benchmark -t 4 -r 25 -q localhost 8080
```

From Python:

- `BenchmarkConfig` holds the settings.
- `run_benchmark(config)` runs the load and returns a `BenchmarkSummary`.
  It raises `AllRequestsFailed` when no request succeeds.
- `format_report(config, summary)` returns the printed results block.
- `make_request(host, port, path, quiet)` sends one request and returns a
  `RequestResult`. The response time is in microseconds.
- `summarize(results, total_seconds)` computes a summary from results you
  already have.
- `build_request(host, port, path)` returns the raw request text.
- `parse_args(argv)` and `usage(prog)` are the command-line helpers.

## Number guessing game

```
miniapps-guess
```

The game picks a number from 1 to 100 and gives you seven tries. After each
guess it tells you whether your guess was too low or too high. If you type
something that is not a whole number, it asks again.

In code, `GuessingGame(secret=..., max_attempts=...)` holds one round. Both
arguments are optional. Each call to `guess(value)` returns a `GuessOutcome`:
`TOO_LOW`, `TOO_HIGH` or `CORRECT`. `attempts_left()` tells you how many tries
remain, and `finished` becomes true when the game is over. Guessing after the
game has ended raises `GameOver`.

## Student records

```
miniapps-students
```

This is a menu for adding, listing, searching and deleting students. Each
record is stored as a line `name,roll,marks` in `students.txt` in the current
directory. A delete rewrites the file through a `temp.txt` in the same
directory.

In code, `StudentStore(path)` has these methods:

- `add(student)` appends a `Student`.
- `lines()` returns the stored lines.
- `find(roll)` returns the first matching line, or `None`.
- `delete(roll)` removes every line with that roll number and returns whether
  any line was removed.

`parse_roll(line)` reads the roll number from a stored line.

## To-do list

```
miniapps-todo
```

This is a menu for adding, viewing and deleting tasks. In code, `TodoList` has
these methods:

- `add(description)` adds a task.
- `delete(number)` removes the task with that 1-based number. It raises
  `IndexError` if the number is out of range.
- `render()` returns the listing.

## What it does not do

- The to-do list keeps tasks in memory only. They are lost when the program
  exits.
- `Task` has a `done` flag, but the menu has no way to mark a task as done.
- The student records cannot be edited in place. To change a record, delete it
  and add it again.
- The benchmark speaks plain HTTP over IPv4 only. It has no TLS and no
  keep-alive.