"""Read input documents (structure requests and the init file) from disk."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Dict

from src.schema import FunctionPathsConfig


def load_input(path) -> Dict:
    """Load a structure request file. TOML by default; ``.json`` files are read as JSON."""
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = tomllib.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a table/object, got {type(data).__name__}")
    return data


def load_function_paths(path) -> FunctionPathsConfig:
    """Load the init file that says where the world's function files live."""
    return FunctionPathsConfig.model_validate(load_input(path))
