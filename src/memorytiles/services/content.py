from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from memorytiles.engine.round import RoundConfig
from memorytiles.engine.types import Symbol, SymbolPool


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def _load_validated(self, name: str) -> dict[str, object]:
        path = self._data_dir / f"{name}.json"
        schema = _load_json(self._schema_dir / f"{name}.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError(f"{name}.json must be an object")
        return raw

    def load_symbols(self) -> SymbolPool:
        raw = self._load_validated("symbols")
        raw_symbols = raw.get("symbols")
        if not isinstance(raw_symbols, list):
            raise ContentError("symbols.json.symbols must be a list")

        symbols: list[Symbol] = []
        seen: set[str] = set()
        for item in raw_symbols:
            if not isinstance(item, dict):
                continue
            glyph = _require_str(item, "glyph")
            if glyph in seen:
                raise ContentError(f"Duplicate symbol glyph: {glyph}")
            seen.add(glyph)
            symbols.append(Symbol(glyph=glyph, name=_require_str(item, "name")))
        return SymbolPool(symbols=tuple(symbols))

    def load_rules(self) -> RoundConfig:
        raw = self._load_validated("rules")
        counts_raw = raw.get("allowed_counts")
        if not isinstance(counts_raw, list):
            raise ContentError("rules.json.allowed_counts must be a list")
        allowed = tuple(sorted({c for c in counts_raw if isinstance(c, int)}))
        default_count = _require_int(raw, "default_count")
        if default_count not in allowed:
            raise ContentError(f"default_count {default_count} is not one of allowed_counts")
        return RoundConfig(
            allowed_counts=allowed,
            default_count=default_count,
            mismatch_delay=_require_int(raw, "mismatch_delay_ms") / 1000.0,
            tick_interval=_require_int(raw, "tick_interval_ms") / 1000.0,
        )

    def validate_all(self) -> None:
        # Load is validation (schema + parse), plus the cross-file capacity check
        pool = self.load_symbols()
        rules = self.load_rules()
        too_big = [c for c in rules.allowed_counts if c > pool.max_cards]
        if too_big:
            raise ContentError(
                f"allowed_counts {too_big} exceed the symbol pool capacity of {pool.max_cards} cards"
            )
