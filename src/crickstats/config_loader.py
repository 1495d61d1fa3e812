"""Persist and load ETL layout profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class DataLayout:
    source_dir: Optional[str] = None
    output_dir: Optional[str] = None
    column_overrides: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "DataLayout":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            source_dir=data.get("source_dir"),
            output_dir=data.get("output_dir"),
            column_overrides=data.get("column_overrides", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "source_dir": self.source_dir,
            "output_dir": self.output_dir,
            "column_overrides": self.column_overrides,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
