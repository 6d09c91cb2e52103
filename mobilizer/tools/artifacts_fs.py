from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional


class ArtifactScopeError(RuntimeError):
    pass


def _slug(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]+", "-", text).strip("-").lower() or "theme"


@dataclass
class RunArtifacts:
    root: Path

    def __post_init__(self) -> None:
        self.root = self.root.resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    @classmethod
    def for_run(cls, runs_dir: Path, theme_name: str, run_id: Optional[str] = None) -> "RunArtifacts":
        run_id = run_id or datetime.now().strftime("%Y%m%d-%H%M%S")
        return cls(root=runs_dir / f"{run_id}-{_slug(theme_name)}")

    def _resolve_rel(self, rel_path: str) -> Path:
        rel_path = rel_path.strip().lstrip("/")
        if rel_path.startswith("..") or "/../" in rel_path or "\\..\\" in rel_path:
            raise ArtifactScopeError(f"Path traversal not allowed: {rel_path}")

        p = (self.root / rel_path).resolve()
        try:
            p.relative_to(self.root)
        except ValueError:
            raise ArtifactScopeError(f"Path escapes artifacts root: {rel_path}")
        return p

    def write_text(self, rel_path: str, content: str) -> Path:
        p = self._resolve_rel(rel_path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
        return p

    def write_json(self, rel_path: str, data: Any) -> Path:
        return self.write_text(rel_path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
