"""Loader for packaged data tables (YAML/JSON).

Definitions live in rental_pricing/definitions unless RENTALPRICING_DEFINITIONS_DIR
points elsewhere. Invalid files raise ValueError with the file name and key,
so CI/test runs fail fast.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..config import DEFINITIONS_DIR


@dataclass(frozen=True)
class PiClassDef:
    name: str
    min: int
    max: int
    color: str


def definitions_dir() -> Path:
    if DEFINITIONS_DIR:
        return Path(DEFINITIONS_DIR)
    return Path(__file__).resolve().parents[1] / "definitions"


def _require(obj: Dict[str, Any], key: str, *, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"Missing required key '{key}' in {ctx}")
    return obj[key]


def load_definition(path: Path) -> Dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(raw) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML must be a mapping in {path}")
        return data
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Top-level JSON must be an object in {path}")
        return data
    raise ValueError(f"Unsupported definition file type: {path}")


def load_pi_classes(path: Path | None = None) -> List[PiClassDef]:
    path = path or (definitions_dir() / "pi_classes.yaml")
    data = load_definition(path)
    ctx = f"definition({path.name})"
    items = _require(data, "classes", ctx=ctx)
    if not isinstance(items, list) or not items:
        raise ValueError(f"'classes' must be a non-empty list in {ctx}")

    out: List[PiClassDef] = []
    for i, it in enumerate(items):
        cctx = f"{ctx}.classes[{i}]"
        if not isinstance(it, dict):
            raise ValueError(f"class must be an object in {cctx}")
        lo = int(_require(it, "min", ctx=cctx))
        hi = int(_require(it, "max", ctx=cctx))
        if lo > hi:
            raise ValueError(f"min > max in {cctx}")
        out.append(
            PiClassDef(
                name=str(_require(it, "name", ctx=cctx)).strip(),
                min=lo,
                max=hi,
                color=str(it.get("color") or "#6b7280"),
            )
        )
    return out


__all__ = ["PiClassDef", "definitions_dir", "load_definition", "load_pi_classes"]
