"""CLI entrypoint.

Commands:
- `md-plaintext convert [INPUT] [-o OUTPUT]`   (stdin/stdout when omitted)
- `md-plaintext stages`
- `md-plaintext trace [INPUT] [--stage NAME ...]`
- `md-plaintext build --config build.yaml`
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from .config.loader import load_build_config
from .logging_ import setup_logging
from .pipeline.build import build_local
from .pipeline.transcode import trace, transcode
from .run_id import resolve_run_id
from .stages.registry import PIPELINE_ORDER, list_stages

log = logging.getLogger("md_plaintext.cli")

def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def _cmd_convert(args: argparse.Namespace) -> int:
    plain = transcode(_read_input(args.input))
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(plain + "\n")
        log.info(f"Wrote {len(plain)} chars to {args.output}")
    else:
        sys.stdout.write(plain + "\n")
    return 0

def _cmd_stages(args: argparse.Namespace, console: Console) -> int:
    table = Table(title="[bold]Pipeline stages[/bold]", box=box.ROUNDED, border_style="green")
    table.add_column("#", justify="right")
    table.add_column("Stage")
    table.add_column("Layer")
    table.add_column("Class")
    for row in list_stages():
        table.add_row(row["position"], row["name"], row["layer"], row["class"])
    console.print(table)
    return 0

def _cmd_trace(args: argparse.Namespace, console: Console) -> int:
    records = trace(_read_input(args.input), stages=args.stage or None)
    table = Table(title="[bold]Stage trace[/bold]", box=box.ROUNDED, border_style="yellow", show_lines=True)
    table.add_column("Stage")
    table.add_column("Output")
    shown = 0
    for rec in records:
        if not rec.changed and not args.all:
            continue
        table.add_row(rec.stage, rec.after if rec.changed else "[dim](unchanged)[/dim]")
        shown += 1
    if shown:
        console.print(table)
    else:
        console.print("[dim]No stage changed the input.[/dim]")
    return 0

def _cmd_build(args: argparse.Namespace) -> int:
    cfg = load_build_config(args.config)
    run = cfg["run"]
    run_id = resolve_run_id(cfg)
    setup_logging(level=run.get("log_level", args.log_level), log_dir=run.get("log_dir"), run_id=run_id)
    manifest = build_local(cfg, run_id, progress=not args.no_progress)
    return 0 if manifest["total_failed_docs"] == 0 or not args.strict else 1

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="md-plaintext", description="Convert Markdown to readable plain text.")
    p.add_argument("--log-level", default="WARNING", help="Console log level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("convert", help="Convert one Markdown file (or stdin)")
    pc.add_argument("input", nargs="?", default=None, help="Markdown file, '-' or omitted for stdin")
    pc.add_argument("-o", "--output", default=None, help="Write plain text here instead of stdout")

    sub.add_parser("stages", help="List pipeline stages in order")

    pt = sub.add_parser("trace", help="Show what each stage did to the input")
    pt.add_argument("input", nargs="?", default=None)
    pt.add_argument("--stage", action="append", choices=PIPELINE_ORDER, help="Only run these stages (repeatable)")
    pt.add_argument("--all", action="store_true", help="Also list stages that changed nothing")

    pb = sub.add_parser("build", help="Batch-convert the sources of a YAML build config")
    pb.add_argument("--config", required=True)
    pb.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    pb.add_argument("--strict", action="store_true", help="Exit 1 if any document failed")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    console = Console()
    try:
        if args.cmd == "convert":
            return _cmd_convert(args)
        if args.cmd == "stages":
            return _cmd_stages(args, console)
        if args.cmd == "trace":
            return _cmd_trace(args, console)
        return _cmd_build(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.error(f"{args.cmd} failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
