"""JSON read/write helpers shared by repositories and the session store."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"File is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read file: {path}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc


def write_json(path: Path, payload: Mapping[str, Any]) -> None:
    """Write ``payload`` next to ``path`` and swap it in with a single rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    os.replace(tmp_path, path)
