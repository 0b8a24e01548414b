"""Build config loader.

Build configs are YAML files:

    run:
      out_dir: out/plain
      run_id: handbook_v2      # optional
      log_dir: out/logs        # optional
      log_level: INFO          # optional
    sources:
      - name: handbook
        kind: markdown_files
        dataset: docs/

Only batch runs read configuration. `transcode()` itself takes no options.
"""

from __future__ import annotations
from typing import Any, Dict
import yaml

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def validate_build_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Check the keys a batch run cannot do without. Returns the config unchanged."""
    if not isinstance(cfg, dict):
        raise ValueError("build config must be a mapping")
    run = cfg.get("run")
    if not isinstance(run, dict) or not run.get("out_dir"):
        raise ValueError("build config is missing run.out_dir")
    sources = cfg.get("sources")
    if not isinstance(sources, list) or not sources:
        raise ValueError("build config needs at least one entry under sources")
    for i, s in enumerate(sources):
        if not isinstance(s, dict):
            raise ValueError(f"sources[{i}] must be a mapping")
        for key in ("name", "kind", "dataset"):
            if not s.get(key):
                raise ValueError(f"sources[{i}] is missing {key}")
    names = [s["name"] for s in sources]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ValueError(f"duplicate source names {dupes}; each source writes under its own name")
    return cfg

def load_build_config(path: str) -> Dict[str, Any]:
    return validate_build_config(load_yaml(path))
