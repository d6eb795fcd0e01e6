"""Load and save weight matrices."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from ..core.grid_graph import MalformedGridError


Weights = List[List[float]]

_TEXT_TOKENS = {".": 1.0, "X": 0.0, "x": 0.0}


def _parse_token(token: str, line_no: int) -> float:
    if token in _TEXT_TOKENS:
        return _TEXT_TOKENS[token]
    try:
        return float(token)
    except ValueError:
        raise MalformedGridError(
            f"line {line_no}: cannot read '{token}' as a weight"
        ) from None


def parse_text_grid(text: str) -> Weights:
    """Parse whitespace separated rows; ``.`` is open floor and ``X`` a wall."""

    weights: Weights = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        weights.append([_parse_token(tok, line_no) for tok in line.split()])
    return weights


def _from_yaml(data: Any) -> Tuple[Any, Optional[bool]]:
    if isinstance(data, dict):
        if "weights" not in data:
            raise MalformedGridError("grid mapping needs a 'weights' key")
        flag = data.get("diagonal")
        return data["weights"], None if flag is None else bool(flag)
    if isinstance(data, list):
        return data, None
    raise MalformedGridError("grid file must hold a list of rows or a mapping")


def load_grid(path: str | Path) -> Tuple[Weights, Optional[bool]]:
    """Read ``path`` and return ``(weights, diagonal)``.

    ``.yaml``/``.yml`` files hold either a list of rows or a mapping with
    ``weights`` and an optional ``diagonal`` flag. Any other suffix is read
    as a plain text grid. ``diagonal`` is ``None`` when the file does not
    set it.
    """

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MalformedGridError(f"invalid YAML in {path}: {exc}") from exc
        return _from_yaml(data)
    return parse_text_grid(text), None


def save_grid(path: str | Path, weights: Weights, diagonal: bool = False) -> None:
    """Write ``weights`` to ``path`` as YAML."""

    data = {"diagonal": bool(diagonal), "weights": [list(row) for row in weights]}
    Path(path).write_text(yaml.safe_dump(data, default_flow_style=None), encoding="utf-8")


__all__ = ["load_grid", "parse_text_grid", "save_grid"]
