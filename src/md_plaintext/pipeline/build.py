"""Batch build runner.

Local runner:
- converts every document of every configured source with `transcode()`
- markdown_files sources: one `.txt` per input file, directory layout mirrored
- local_jsonl sources: `<out_dir>/<source>.jsonl`, each record with the plain
  text added under `output_field`
- writes `manifest.json` with per-source and total counts

Bad items (unreadable files, invalid JSON lines, failed writes) are logged and
skipped; the run carries on.
"""

from __future__ import annotations
from typing import Any, Dict, List, Set
import os, time, logging
from tqdm import tqdm

from ..sources.base import SourceSpec
from ..sources.registry import make_source
from ..storage.writer import text_output_path, write_jsonl, write_manifest, write_text
from .context import ConversionResult
from .transcode import transcode

log = logging.getLogger("md_plaintext.build")

def _spec_from_cfg(s_cfg: Dict[str, Any]) -> SourceSpec:
    known = set(SourceSpec.__dataclass_fields__)
    unknown = set(s_cfg) - known
    if unknown:
        raise ValueError(f"Source {s_cfg.get('name')}: unknown keys {sorted(unknown)}")
    return SourceSpec(**s_cfg)

def build_local(cfg: Dict[str, Any], run_id: str, *, progress: bool = True) -> Dict[str, Any]:
    """Convert every configured source. Returns the manifest that was written."""
    out_dir = cfg["run"]["out_dir"]
    os.makedirs(out_dir, exist_ok=True)
    start_time_ms = int(time.time() * 1000)

    sources: Dict[str, Dict[str, Any]] = {}
    total_converted = 0
    total_failed = 0

    for s_cfg in cfg["sources"]:
        spec = _spec_from_cfg(s_cfg)
        src = make_source(spec)
        meta = src.metadata()
        log.info(f"Starting source={spec.name} kind={spec.kind} files={meta.get('file_count', 'N/A')}")

        results: List[ConversionResult] = []
        rows: List[Dict[str, Any]] = []
        failed = 0
        written: Set[str] = set()

        for raw in tqdm(src.stream(), desc=spec.name, unit="doc", disable=not progress):
            plain = transcode(raw.text)
            res = ConversionResult(
                item_id=raw.raw_id,
                source=spec.name,
                chars_in=len(raw.text),
                chars_out=len(plain),
                source_path=raw.path,
            )
            if spec.kind == "local_jsonl":
                record = {k: v for k, v in raw.extra.items() if k != "source_line"}
                record[spec.output_field] = plain
                rows.append(record)
            else:
                rel = raw.rel_path or f"{raw.raw_id}.md"
                target = text_output_path(os.path.join(out_dir, spec.name), rel)
                if target in written:
                    # a.md next to a.markdown, or the same relative path under two roots
                    target = text_output_path(os.path.join(out_dir, spec.name), rel, keep_suffix=True)
                    log.warning(f"Source {spec.name}: output name taken for {raw.path}, writing {target}")
                if target in written:
                    log.error(f"Source {spec.name}: {raw.path} would overwrite {target}, skipping")
                    failed += 1
                    continue
                try:
                    res.output_path = write_text(target, plain)
                    written.add(target)
                except OSError as e:
                    log.error(f"Source {spec.name}: could not write {raw.raw_id}: {e}")
                    failed += 1
                    continue
            log.debug(f"source={spec.name} item={raw.raw_id} chars {res.chars_in} -> {res.chars_out}")
            results.append(res)

        s_stats: Dict[str, Any] = {"kind": spec.kind, "converted": len(results), "failed": failed}
        if rows:
            out_path = os.path.join(out_dir, f"{spec.name}.jsonl")
            try:
                write_jsonl(out_path, rows)
                s_stats["output"] = out_path
            except OSError as e:
                log.error(f"Source {spec.name}: could not write {out_path}: {e}")
                s_stats["failed"] += len(results)
                s_stats["converted"] = 0
        elif results:
            s_stats["output"] = os.path.join(out_dir, spec.name)

        if not results:
            log.warning(f"Source {spec.name}: No documents were yielded. Check that the dataset path exists and contains data.")
        s_stats["chars_in"] = sum(r.chars_in for r in results)
        s_stats["chars_out"] = sum(r.chars_out for r in results)
        sources[spec.name] = s_stats
        total_converted += s_stats["converted"]
        total_failed += s_stats["failed"]
        log.info(f"Source {spec.name} complete: converted={s_stats['converted']} failed={s_stats['failed']}")

    manifest = {
        "run_id": run_id,
        "start_time_ms": start_time_ms,
        "end_time_ms": int(time.time() * 1000),
        "total_converted_docs": total_converted,
        "total_failed_docs": total_failed,
        "sources": sources,
    }
    path = write_manifest(out_dir, manifest)
    log.info(f"Build complete. converted={total_converted} failed={total_failed} manifest={path}")
    return manifest
