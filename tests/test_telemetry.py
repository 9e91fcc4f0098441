from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from memorytiles.services.telemetry import TelemetryService


def test_records_are_appended_as_json_lines(tmp_path: Path) -> None:
    fixed = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    path = tmp_path / "nested" / "telemetry.jsonl"
    telemetry = TelemetryService(path, clock=lambda: fixed)

    telemetry.log("round_started", {"generation": 1, "card_count": 16})
    telemetry.log("round_won", {"generation": 1, "moves": 9, "elapsed": 41})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    records = telemetry.read()
    assert [r["seq"] for r in records] == [1, 2]
    assert records[0]["ts"] == "2024-05-01T12:00:00+00:00"
    assert records[1] == {
        "ts": "2024-05-01T12:00:00+00:00",
        "seq": 2,
        "type": "round_won",
        "payload": {"generation": 1, "moves": 9, "elapsed": 41},
    }


def test_read_missing_file(tmp_path: Path) -> None:
    assert TelemetryService(tmp_path / "none.jsonl").read() == []
