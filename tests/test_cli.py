import io

import pytest

from solidsnake import cli


def test_fibonacci_small_value():
    assert cli.fibonacci(10) == 55


def test_fibonacci_base_cases():
    assert cli.fibonacci(0) == 0
    assert cli.fibonacci(1) == 1
    assert cli.fibonacci_recursive(0) == 0
    assert cli.fibonacci_recursive(1) == 1


def test_fibonacci_recurrence_holds():
    for n in range(2, 90):
        assert cli.fibonacci(n) == cli.fibonacci(n - 1) + cli.fibonacci(n - 2)


def test_iterative_and_recursive_agree():
    for n in range(20):
        assert cli.fibonacci_recursive(n) == cli.fibonacci(n)


def test_bench_native_fib_returns_result(capsys):
    avg_ns, result = cli.bench_native_fib(30, 5)
    assert result == cli.fibonacci(30)
    assert avg_ns >= 0
    out = capsys.readouterr().out
    assert out.startswith("Native avg over 5 runs: ")
    assert f"(total: {result})" in out


def test_bench_native_fib_recursive_returns_result(capsys):
    avg_ns, result = cli.bench_native_fib_recursive(12, 3)
    assert result == cli.fibonacci(12)
    assert avg_ns >= 0
    assert f"Native recursive avg over 3 runs: {avg_ns} ns (result: {result})" in capsys.readouterr().out


@pytest.mark.parametrize("bench", [cli.bench_native_fib, cli.bench_native_fib_recursive])
def test_bench_rejects_zero_iterations(bench):
    with pytest.raises(ValueError):
        bench(5, 0)


def test_system_banner_contents():
    banner = cli.system_banner("9.9.9")
    assert "🐍 Solid Snake 9.9.9 Repl" in banner
    assert "System:" in banner
    assert "Kernel" in banner
    assert "Memory used:" in banner


def test_main_runs_without_waiting(capsys):
    code = cli.main(["--fib-n", "10", "--iterations", "2", "--recursive-max", "3",
                     "--recursive-iterations", "1", "--no-wait"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("🐍 Solid Snake starting..")
    assert "(total: 55)" in out
    assert "Solid Snake 0.1.0 Repl" in out
    assert out.count("Native recursive avg over 1 runs") == 3


def test_main_waits_for_input(monkeypatch, capsys):
    stdin = io.StringIO("x")
    monkeypatch.setattr("sys.stdin", stdin)
    code = cli.main(["--fib-n", "5", "--iterations", "1", "--recursive-max", "0"])
    assert code == 0
    assert stdin.read() == ""
    assert "Repl" in capsys.readouterr().out


def test_main_reports_bad_iterations(capsys):
    code = cli.main(["--iterations", "0", "--no-wait"])
    assert code == 2
    assert "error:" in capsys.readouterr().err