import pytest

from podprobe.services.fibonacci import effective_n, fib, timed_fib


def _iterative_fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 20, 25])
def test_fib_matches_iterative(n):
    assert fib(n) == _iterative_fib(n)


def test_timed_fib_reports_elapsed_time():
    result, elapsed_ms = timed_fib(15)

    assert result == 610
    assert elapsed_ms >= 0.0


def test_effective_n_defaults_and_clamps():
    assert effective_n(None, 10, 45) == 10
    assert effective_n(30, 10, 45) == 30
    assert effective_n(45, 10, 45) == 45
    assert effective_n(1000, 10, 45) == 45


def test_fib_endpoint_defaults_to_ten(client):
    resp = client.get("/fib")

    assert resp.status_code == 200
    body = resp.json()
    assert body["n"] == 10
    assert body["result"] == 55
    assert body["computation_ms"] >= 0.0


def test_fib_endpoint_computes_requested_value(client):
    body = client.get("/fib", params={"n": 20}).json()

    assert body == {"n": 20, "result": 6765, "computation_ms": body["computation_ms"]}


def test_fib_endpoint_clamps_to_configured_cap(client, settings):
    body = client.get("/fib", params={"n": 500}).json()

    assert body["n"] == settings.fib_max_n
    assert body["result"] == _iterative_fib(settings.fib_max_n)


@pytest.mark.parametrize("value", ["-1", "abc", "2.5"])
def test_fib_endpoint_rejects_invalid_n(client, value):
    resp = client.get("/fib", params={"n": value})

    assert resp.status_code == 422
