from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from mobilizer.tools.prioritize import MAX_MOBILE_SECTIONS

DEFAULT_SAVE_PATH = "/api/templates/save"
DEFAULT_MAX_ENTRY_BYTES = 2 * 1024 * 1024


def _env_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class MobilizerConfig:
    backend_url: Optional[str] = None
    backend_token: Optional[str] = None
    backend_save_path: str = DEFAULT_SAVE_PATH
    backend_timeout_sec: float = 30.0
    backend_max_retries: int = 1
    max_sections: int = MAX_MOBILE_SECTIONS
    max_entry_bytes: int = DEFAULT_MAX_ENTRY_BYTES
    goeye_override: bool = True
    runs_dir: Path = Path("runs")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "MobilizerConfig":
        env = os.environ if env is None else env
        return cls(
            backend_url=env.get("MOBILIZER_BACKEND_URL") or None,
            backend_token=env.get("MOBILIZER_BACKEND_TOKEN") or None,
            backend_save_path=env.get("MOBILIZER_BACKEND_SAVE_PATH", DEFAULT_SAVE_PATH),
            backend_timeout_sec=float(env.get("MOBILIZER_BACKEND_TIMEOUT_SEC", "30")),
            backend_max_retries=int(env.get("MOBILIZER_BACKEND_MAX_RETRIES", "1")),
            max_sections=int(env.get("MOBILIZER_MAX_SECTIONS", str(MAX_MOBILE_SECTIONS))),
            max_entry_bytes=int(env.get("MOBILIZER_MAX_ENTRY_BYTES", str(DEFAULT_MAX_ENTRY_BYTES))),
            goeye_override=not _env_bool(env.get("MOBILIZER_DISABLE_GOEYE")),
            runs_dir=Path(env.get("MOBILIZER_RUNS_DIR", "runs")),
        )

    def with_overrides(self, **changes) -> "MobilizerConfig":
        # CLI flags left unset come through as None
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
