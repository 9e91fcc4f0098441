from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Mapping


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass
class TelemetryService:
    """Append-only JSON-lines event log.

    Each record is `{"ts", "seq", "type", "payload"}`; `seq` counts records
    written by this service instance so one play session can be told apart
    from the next in a shared file.
    """

    path: Path
    clock: Callable[[], datetime] = _utc_now
    _seq: int = field(default=0, init=False)

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self._seq += 1
        rec = {
            "ts": self.clock().isoformat(),
            "seq": self._seq,
            "type": event_type,
            "payload": dict(payload),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def read(self) -> list[dict[str, object]]:
        if not self.path.exists():
            return []
        return [
            json.loads(line)
            for line in self.path.read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
