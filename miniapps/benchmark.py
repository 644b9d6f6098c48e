"""Concurrent HTTP GET load generator that reports latency statistics."""

from __future__ import annotations

import math
import socket
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

_print_lock = threading.Lock()

_BUFFER_SIZE = 4096


@dataclass(frozen=True)
class RequestResult:
    """Outcome of one request; response time is in microseconds."""

    response_time: int
    response_length: int
    success: bool


@dataclass(frozen=True)
class BenchmarkConfig:
    """Settings for one benchmark run."""

    host: str
    port: str
    path: str = "/"
    threads: int = 10
    requests_per_thread: int = 10
    warmup: bool = False
    quiet: bool = False


@dataclass(frozen=True)
class BenchmarkSummary:
    """Aggregate statistics over the successful requests of a run."""

    successful: int
    failed: int
    total_seconds: float
    requests_per_second: float
    avg_time_us: int
    min_time_us: int
    max_time_us: int
    p90_us: int
    avg_length: int


class AllRequestsFailed(Exception):
    """Raised when no request of a run succeeded."""

    def __init__(self) -> None:
        super().__init__("All requests failed!")


class _MissingArguments(ValueError):
    """HOST or PORT was not given on the command line."""


def _log(message: str, quiet: bool) -> None:
    if not quiet:
        with _print_lock:
            print(message, flush=True)


def build_request(host: str, port: str, path: str) -> str:
    """Return the raw HTTP/1.1 GET request text."""
    host_header = host if port == "80" else f"{host}:{port}"
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host_header}\r\n"
        "Connection: close\r\n"
        "User-Agent: benchmark/1.0\r\n"
        "\r\n"
    )


def make_request(host: str, port: str, path: str, quiet: bool) -> RequestResult:
    """Send one GET request and read the whole response."""
    failure = RequestResult(0, 0, False)
    try:
        addresses = socket.getaddrinfo(
            host, port, socket.AF_INET, socket.SOCK_STREAM
        )
    except socket.gaierror as exc:
        _log(f"[ERROR] getaddrinfo: {exc.errno}", quiet)
        return failure

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError:
        _log("[ERROR] socket creation failed", quiet)
        return failure

    with sock:
        try:
            sock.connect(addresses[0][4])
        except OSError:
            _log("[ERROR] connect failed", quiet)
            return failure

        request = build_request(host, port, path).encode("latin-1")
        start = time.perf_counter_ns()
        try:
            sock.sendall(request)
        except OSError:
            _log("[ERROR] send failed", quiet)
            return failure

        received = 0
        while True:
            try:
                chunk = sock.recv(_BUFFER_SIZE)
            except OSError:
                break
            if not chunk:
                break
            received += len(chunk)

    response_time = (time.perf_counter_ns() - start) // 1000

    if received == 0:
        _log("[ERROR] Empty response", quiet)
        return RequestResult(response_time, 0, False)

    _log(f"[SUCCESS] Request completed: {received} bytes", quiet)
    return RequestResult(response_time, received, True)


def summarize(results: Iterable[RequestResult], total_seconds: float) -> BenchmarkSummary:
    """Compute statistics over the successful results.

    Raises AllRequestsFailed when none succeeded.
    """
    results = list(results)
    successes = [r for r in results if r.success]
    if not successes:
        raise AllRequestsFailed()

    times = sorted(r.response_time for r in successes)
    total_bytes = sum(r.response_length for r in successes)
    count = len(successes)
    rps = count / total_seconds if total_seconds > 0 else math.inf

    return BenchmarkSummary(
        successful=count,
        failed=len(results) - count,
        total_seconds=total_seconds,
        requests_per_second=rps,
        avg_time_us=sum(times) // len(times),
        min_time_us=times[0],
        max_time_us=times[-1],
        p90_us=times[(90 * len(times)) // 100],
        avg_length=total_bytes // count,
    )


def run_benchmark(config: BenchmarkConfig) -> BenchmarkSummary:
    """Run the configured load and return its summary."""
    results: list[RequestResult] = []
    results_lock = threading.Lock()

    def worker() -> None:
        if config.warmup:
            make_request(config.host, config.port, config.path, True)
        for _ in range(config.requests_per_thread):
            result = make_request(config.host, config.port, config.path, config.quiet)
            with results_lock:
                results.append(result)

    start = time.perf_counter_ns()
    threads = [threading.Thread(target=worker) for _ in range(config.threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    total_us = (time.perf_counter_ns() - start) // 1000

    return summarize(results, total_us / 1e6)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def format_report(config: BenchmarkConfig, summary: BenchmarkSummary) -> str:
    """Render the human-readable results block."""
    total_ms = round(summary.total_seconds * 1e6) / 1000.0
    lines = [
        "",
        " Benchmark Results",
        "========================",
        f"Host: {config.host}:{config.port}",
        f"Path: {config.path}",
        f"Threads: {config.threads}",
        f"Requests per thread: {config.requests_per_thread}",
        f"Total requests: {config.threads * config.requests_per_thread}",
        f"Successful: {summary.successful}",
        f"Failed: {summary.failed}",
        f"Total time: {total_ms:g} ms",
        f"Requests/sec: {_round_half_away(summary.requests_per_second):g}",
        f"Avg response time: {summary.avg_time_us} μs "
        f"({summary.avg_time_us / 1000.0:g} ms)",
        f"Min response time: {summary.min_time_us} μs",
        f"Max response time: {summary.max_time_us} μs",
        f"90th percentile: {summary.p90_us} μs",
        f"Avg response size: {summary.avg_length} bytes",
    ]
    return "\n".join(lines) + "\n"


def usage(prog: str) -> str:
    """Return the usage text."""
    return (
        f"Usage: {prog} [OPTIONS] HOST PORT\n"
        "Options:\n"
        "  -p PATH           Path to request (default: /)\n"
        "  -t N              Number of threads (default: 10)\n"
        "  -r N              Requests per thread (default: 10)\n"
        "  -w                Warm-up phase (do one request before timing)\n"
        "  -q                Quiet mode (no per-request logs)\n"
    )


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything unparsable is 0."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_args(argv: Sequence[str]) -> BenchmarkConfig | None:
    """Build a config from command-line arguments (without the program name).

    Returns None when help was requested; raises ValueError on bad input.
    """
    host: str | None = None
    port: str | None = None
    path = "/"
    threads = 10
    requests_per_thread = 10
    warmup = False
    quiet = False

    pending = deque(argv)
    while pending:
        arg = pending.popleft()
        if arg == "-p" and pending:
            path = pending.popleft()
        elif arg == "-t" and pending:
            threads = _atoi(pending.popleft())
        elif arg == "-r" and pending:
            requests_per_thread = _atoi(pending.popleft())
        elif arg == "-w":
            warmup = True
        elif arg == "-q":
            quiet = True
        elif arg == "-h":
            return None
        elif host is None:
            host = arg
        elif port is None:
            port = arg

    if host is None or port is None:
        raise _MissingArguments("Error: HOST and PORT are required.")
    if threads <= 0 or requests_per_thread <= 0:
        raise ValueError("Threads and requests must be > 0.")

    return BenchmarkConfig(
        host=host,
        port=port,
        path=path,
        threads=threads,
        requests_per_thread=requests_per_thread,
        warmup=warmup,
        quiet=quiet,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    if argv is None:
        argv = sys.argv[1:]
    prog = "benchmark"

    try:
        config = parse_args(argv)
    except _MissingArguments as exc:
        print(f" {exc}", file=sys.stderr)
        print(usage(prog), end="")
        return 1
    except ValueError as exc:
        print(f" {exc}", file=sys.stderr)
        return 1

    if config is None:
        print(usage(prog), end="")
        return 0

    _log(" Starting benchmark...", config.quiet)
    try:
        summary = run_benchmark(config)
    except AllRequestsFailed:
        print(" All requests failed!")
        return 0

    print(format_report(config, summary), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())