"""Finds the JSON and CSV files offered to the agent as tables."""
from __future__ import annotations

from pathlib import Path
from typing import List, Union

TABLE_PATTERNS = ("*.json", "*.csv")


def discover_tables(directory: Union[str, Path, None] = None) -> List[str]:
    """List candidate table files: JSON first, then CSV, each sorted by name."""
    root = Path(directory) if directory is not None else Path.cwd()
    tables: List[str] = []
    for pattern in TABLE_PATTERNS:
        tables.extend(sorted(p.name for p in root.glob(pattern) if p.is_file()))
    return tables
