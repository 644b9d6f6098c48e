import socket
import socketserver
import threading

import pytest

from miniapps.benchmark import (
    AllRequestsFailed,
    BenchmarkConfig,
    BenchmarkSummary,
    RequestResult,
    build_request,
    format_report,
    main,
    make_request,
    parse_args,
    run_benchmark,
    summarize,
    usage,
)

RESPONSE = b"HTTP/1.1 200 OK\r\nContent-Length: 5\r\nConnection: close\r\n\r\nhello"


class _Handler(socketserver.BaseRequestHandler):
    def handle(self):
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = self.request.recv(1024)
            if not chunk:
                break
            data += chunk
        self.server.requests.append(data)
        self.request.sendall(RESPONSE)


class _Server(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True


@pytest.fixture
def server():
    srv = _Server(("127.0.0.1", 0), _Handler)
    srv.requests = []
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    try:
        yield srv
    finally:
        srv.shutdown()
        srv.server_close()


def _port(srv):
    return str(srv.server_address[1])


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return str(sock.getsockname()[1])


def test_build_request_default_port_omits_port():
    assert build_request("example.com", "80", "/index") == (
        "GET /index HTTP/1.1\r\n"
        "Host: example.com\r\n"
        "Connection: close\r\n"
        "User-Agent: benchmark/1.0\r\n"
        "\r\n"
    )


def test_build_request_other_port_in_host_header():
    text = build_request("example.com", "8080", "/")
    assert "Host: example.com:8080\r\n" in text
    assert text.startswith("GET / HTTP/1.1\r\n")
    assert text.endswith("\r\n\r\n")


def test_make_request_success(server):
    result = make_request("127.0.0.1", _port(server), "/x", True)
    assert result.success is True
    assert result.response_length == len(RESPONSE)
    assert result.response_time >= 0
    assert server.requests[0].startswith(b"GET /x HTTP/1.1\r\n")


def test_make_request_logs_success(server, capsys):
    make_request("127.0.0.1", _port(server), "/", False)
    out = capsys.readouterr().out
    assert f"[SUCCESS] Request completed: {len(RESPONSE)} bytes" in out


def test_make_request_connect_failure(capsys):
    result = make_request("127.0.0.1", _closed_port(), "/", False)
    assert result == RequestResult(0, 0, False)
    assert "[ERROR] connect failed" in capsys.readouterr().out


def test_make_request_quiet_failure_prints_nothing(capsys):
    result = make_request("127.0.0.1", _closed_port(), "/", True)
    assert result.success is False
    assert capsys.readouterr().out == ""


def test_summarize_statistics_invariants():
    times = [50, 10, 40, 30, 20, 90, 60, 80, 70, 100]
    results = [RequestResult(t, 10, True) for t in times]
    results.append(RequestResult(0, 0, False))
    summary = summarize(results, 2.0)
    assert summary.successful == len(times)
    assert summary.failed == 1
    assert summary.min_time_us == min(times)
    assert summary.max_time_us == max(times)
    assert summary.min_time_us <= summary.avg_time_us <= summary.max_time_us
    assert summary.min_time_us <= summary.p90_us <= summary.max_time_us
    assert summary.avg_length == 10
    assert summary.requests_per_second == len(times) / 2.0


def test_summarize_single_result():
    summary = summarize([RequestResult(123, 7, True)], 1.0)
    assert summary.p90_us == 123
    assert summary.avg_time_us == 123
    assert summary.avg_length == 7


def test_summarize_all_failed():
    with pytest.raises(AllRequestsFailed):
        summarize([RequestResult(0, 0, False)], 1.0)


def test_summarize_empty():
    with pytest.raises(AllRequestsFailed):
        summarize([], 1.0)


def test_run_benchmark_against_server(server):
    config = BenchmarkConfig("127.0.0.1", _port(server), threads=3,
                             requests_per_thread=2, warmup=True, quiet=True)
    summary = run_benchmark(config)
    assert summary.successful == 6
    assert summary.failed == 0
    assert summary.avg_length == len(RESPONSE)
    assert len(server.requests) == 9


def test_run_benchmark_all_failed():
    config = BenchmarkConfig("127.0.0.1", _closed_port(), threads=2,
                             requests_per_thread=1, quiet=True)
    with pytest.raises(AllRequestsFailed):
        run_benchmark(config)


def test_format_report_contents():
    config = BenchmarkConfig("example.com", "8080", path="/a", threads=3,
                             requests_per_thread=4)
    summary = BenchmarkSummary(
        successful=12, failed=0, total_seconds=1.0, requests_per_second=12.0,
        avg_time_us=1500, min_time_us=1000, max_time_us=2000, p90_us=1900,
        avg_length=256,
    )
    report = format_report(config, summary)
    lines = report.splitlines()
    assert "Host: example.com:8080" in lines
    assert "Path: /a" in lines
    assert "Threads: 3" in lines
    assert "Total requests: 12" in lines
    assert "Avg response time: 1500 μs (1.5 ms)" in lines
    assert "90th percentile: 1900 μs" in lines
    assert "Avg response size: 256 bytes" in lines


def test_usage_mentions_prog_and_options():
    text = usage("bench")
    assert text.startswith("Usage: bench [OPTIONS] HOST PORT\n")
    for option in ("-p PATH", "-t N", "-r N", "-w", "-q"):
        assert option in text


def test_parse_args_defaults():
    config = parse_args(["localhost", "8000"])
    assert config == BenchmarkConfig("localhost", "8000", "/", 10, 10, False, False)


def test_parse_args_all_options():
    config = parse_args(["-p", "/x", "-t", "4", "-r", "5", "-w", "-q", "h", "81"])
    assert config == BenchmarkConfig("h", "81", "/x", 4, 5, True, True)


def test_parse_args_extra_positionals_ignored():
    config = parse_args(["h", "81", "extra"])
    assert (config.host, config.port) == ("h", "81")


def test_parse_args_trailing_flag_is_positional():
    config = parse_args(["h", "-p"])
    assert config.port == "-p"


def test_parse_args_help_returns_none():
    assert parse_args(["-h", "h", "81"]) is None


def test_parse_args_missing_port():
    with pytest.raises(ValueError, match="HOST and PORT"):
        parse_args(["h"])


@pytest.mark.parametrize("args", [["-t", "0", "h", "1"], ["-r", "-3", "h", "1"],
                                  ["-t", "abc", "h", "1"]])
def test_parse_args_non_positive(args):
    with pytest.raises(ValueError, match="must be > 0"):
        parse_args(args)


def test_parse_args_lenient_number():
    assert parse_args(["-t", "7x", "h", "1"]).threads == 7


def test_main_missing_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "HOST and PORT are required." in captured.err
    assert "Usage:" in captured.out


def test_main_bad_counts(capsys):
    assert main(["-t", "0", "h", "1"]) == 1
    assert "Threads and requests must be > 0." in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_runs_benchmark(server, capsys):
    assert main(["-q", "-t", "2", "-r", "2", "127.0.0.1", _port(server)]) == 0
    out = capsys.readouterr().out
    assert "Successful: 4" in out
    assert "Failed: 0" in out
    assert "Starting benchmark" not in out


def test_main_all_failed(capsys):
    assert main(["-q", "-t", "1", "-r", "1", "127.0.0.1", _closed_port()]) == 0
    assert "All requests failed!" in capsys.readouterr().out