"""JSON export of a decoded response envelope."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def dump_response_json(response: BaseModel) -> str:
    """Serialize a `Response[T]` to stable, indented JSON."""

    payload = response.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_response_json(*, response: BaseModel, output_path: Path) -> Path:
    """Write a `Response[T]` to `output_path` as UTF-8 JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_response_json(response), encoding="utf-8")
    return output_path
