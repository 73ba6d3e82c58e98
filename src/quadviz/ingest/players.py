"""Helpers to load player metric datasets and emit canonical records."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, ValidationError

from quadviz.config.positions import Position, position_label
from quadviz.models import PlayerRecord


logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when a player dataset cannot be turned into records."""


DEFAULT_PLAYER_MAPPING: Dict[str, str] = {
    "player_id": "id",
    "name": "name",
    "team": "team",
    "position": "position",
    "note": "note",
}

_IDENTITY_FIELDS = ("player_id", "name", "team", "position", "note")


class PlayerRow(BaseModel):
    raw_id: str = ""
    raw_name: str = ""
    raw_team: str = ""
    raw_position: str = ""
    raw_note: str = ""
    raw_metrics: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], mapping: Mapping[str, str]) -> "PlayerRow":
        def parse_spec(key: str) -> Optional[Union[str, Sequence[str]]]:
            spec = mapping.get(key)
            if spec is None:
                return None
            if "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        def extract(spec: Optional[Union[str, Sequence[str]]]) -> str:
            if spec is None:
                return ""
            if isinstance(spec, str):
                value = row.get(spec)
                return str(value).strip() if value is not None else ""
            parts = [str(row.get(col, "")).strip() for col in spec if row.get(col)]
            return " ".join(parts)

        identity_columns = set()
        for key in _IDENTITY_FIELDS:
            spec = parse_spec(key)
            if spec is None:
                continue
            identity_columns.update([spec] if isinstance(spec, str) else spec)

        metrics = {
            column: str(value).strip()
            for column, value in row.items()
            if column and column not in identity_columns and value is not None
        }
        return cls(
            raw_id=extract(parse_spec("player_id")),
            raw_name=extract(parse_spec("name")),
            raw_team=extract(parse_spec("team")),
            raw_position=extract(parse_spec("position")),
            raw_note=extract(parse_spec("note")),
            raw_metrics=metrics,
        )


def _parse_metric(column: str, raw: str) -> Optional[float]:
    text = raw.strip().rstrip("%")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.debug("Skipping non-numeric value %r for metric %s", raw, column)
        return None


def rows_to_records(rows: Sequence[PlayerRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    seen: set[str] = set()
    for line, row in enumerate(rows, start=1):
        player_id = row.raw_id or row.raw_name
        if not player_id:
            raise DatasetError(f"Row {line} has neither an id nor a name")
        if player_id in seen:
            raise DatasetError(f"Duplicate player id {player_id!r} in row {line}")
        seen.add(player_id)

        metrics: Dict[str, float] = {}
        for column, raw in row.raw_metrics.items():
            value = _parse_metric(column, raw)
            if value is not None:
                metrics[column] = value
        try:
            record = PlayerRecord(
                player_id=player_id,
                name=row.raw_name or player_id,
                team=row.raw_team.upper(),
                position=row.raw_position.upper(),
                metrics=metrics,
                note=row.raw_note,
            )
        except ValidationError as exc:
            raise DatasetError(f"Row {line} is not a valid player: {exc}") from exc
        records.append(record)
    return records


def _check_columns(columns: Iterable[str], mapping: Mapping[str, str], source: Path) -> None:
    available = set(columns)
    for key in ("player_id", "name"):
        spec = mapping.get(key)
        if spec and all(part.strip() in available for part in spec.split("|")):
            return
    raise DatasetError(f"{source} has no id or name column (mapping={dict(mapping)})")


def load_players_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Read a CSV with identity columns plus one column per metric."""

    mapping = {**DEFAULT_PLAYER_MAPPING, **(mapping or {})}
    try:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            _check_columns(reader.fieldnames or [], mapping, path)
            rows = [PlayerRow.from_mapping(row, mapping) for row in reader]
    except UnicodeDecodeError as exc:
        raise DatasetError(f"{path} is not valid UTF-8: {exc}") from exc
    records = rows_to_records(rows)
    logger.info("Loaded %d players from %s", len(records), path)
    return records


def load_players_json(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Read a JSON list of player objects, or an object keyed by player id."""

    mapping = {**DEFAULT_PLAYER_MAPPING, **(mapping or {})}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise DatasetError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{path} is not valid JSON: {exc}") from exc

    if isinstance(payload, dict):
        id_column = mapping["player_id"]
        items = []
        for key, value in payload.items():
            if not isinstance(value, dict):
                raise DatasetError(f"{path} entry {key!r} is not an object: {value!r}")
            items.append({id_column: key, **value})
    elif isinstance(payload, list):
        items = payload
    else:
        raise DatasetError(f"{path} must contain a list or an object of players")

    rows = []
    for item in items:
        if not isinstance(item, dict):
            raise DatasetError(f"{path} contains a non-object player entry: {item!r}")
        flattened = {key: value for key, value in item.items() if key != "metrics"}
        metrics = item.get("metrics") or {}
        if not isinstance(metrics, dict):
            raise DatasetError(f"{path} has non-object metrics for entry {item!r}")
        flattened.update(metrics)
        rows.append(PlayerRow.from_mapping(flattened, mapping))
    records = rows_to_records(rows)
    logger.info("Loaded %d players from %s", len(records), path)
    return records


def load_players(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    if path.suffix.lower() == ".json":
        return load_players_json(path, mapping=mapping)
    return load_players_csv(path, mapping=mapping)


def filter_by_position(
    players: Iterable[PlayerRecord], position: Union[str, Position]
) -> List[PlayerRecord]:
    label = position_label(position)
    return [player for player in players if position_label(player.position) == label]
