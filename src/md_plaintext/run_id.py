"""Run ID resolution: explicit from config or generated from a UTC timestamp."""

from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Any, Dict

def generate_run_id(prefix: str = "run") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"{prefix}_{ts}"

def resolve_run_id(cfg: Dict[str, Any]) -> str:
    """Return run.run_id if set, otherwise a timestamped id named after the first source."""
    run = cfg.get("run") or {}
    if run.get("run_id"):
        return str(run["run_id"])
    sources = cfg.get("sources") or []
    name = (sources[0].get("name") if sources else None) or "run"
    # Safe for file names: alphanumeric, dash and underscore
    name = re.sub(r"[^\w\-]", "_", str(name)) or "run"
    return generate_run_id(name)
