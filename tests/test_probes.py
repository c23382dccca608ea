from datetime import datetime

from podprobe.services.clock import ProcessClock


def test_healthz_reports_ok(client):
    resp = client.get("/healthz")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert isinstance(body["uptime_seconds"], int)
    assert body["uptime_seconds"] >= 0
    assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00")).tzinfo is not None


def test_readyz_reports_ready(client):
    resp = client.get("/readyz")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"


def test_uptime_never_decreases_between_probes(client):
    first = client.get("/healthz").json()["uptime_seconds"]
    second = client.get("/readyz").json()["uptime_seconds"]

    assert second >= first


def test_clock_counts_whole_seconds():
    ticks = iter([100.0, 100.4, 101.9, 163.2])

    clock = ProcessClock(timer=lambda: next(ticks))

    assert clock.uptime_seconds() == 0
    assert clock.uptime_seconds() == 1
    assert clock.uptime_seconds() == 63


def test_clock_is_monotonic_over_many_reads():
    clock = ProcessClock()
    readings = [clock.uptime() for _ in range(1000)]

    assert readings == sorted(readings)
    assert readings[0] >= 0.0
