from prometheus_client.parser import text_string_to_metric_families

from podprobe.services import system_info
from podprobe.services.system_info import MemoryStats


def _samples(text):
    return {
        sample.name: sample.value
        for family in text_string_to_metric_families(text)
        for sample in family.samples
    }


def test_metrics_exposes_four_gauges(client, monkeypatch):
    monkeypatch.setattr(
        system_info,
        "get_memory",
        lambda: MemoryStats(total_bytes=8 * 1024**3, used_bytes=2 * 1024**3),
    )
    monkeypatch.setattr(system_info, "get_cpu_count", lambda: 4)

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain; version=0.0.4")
    assert "# TYPE app_uptime_seconds gauge" in resp.text
    assert "# HELP app_cpu_count Number of CPUs available" in resp.text

    samples = _samples(resp.text)
    assert samples["app_memory_total_bytes"] == 8 * 1024**3
    assert samples["app_memory_used_bytes"] == 2 * 1024**3
    assert samples["app_cpu_count"] == 4
    assert samples["app_uptime_seconds"] >= 0


def test_metrics_omits_default_process_collectors(client):
    text = client.get("/metrics").text

    assert "process_cpu_seconds_total" not in text
    assert "python_info" not in text
    assert set(_samples(text)) == {
        "app_uptime_seconds",
        "app_memory_total_bytes",
        "app_memory_used_bytes",
        "app_cpu_count",
    }
