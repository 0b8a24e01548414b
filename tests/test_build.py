"""
Tests for config loading, batch builds and the CLI.
"""

import json

import pytest
import yaml

from md_plaintext.cli import main
from md_plaintext.config.loader import load_build_config, validate_build_config
from md_plaintext.pipeline.build import build_local
from md_plaintext.run_id import resolve_run_id


def _write_config(root, cfg):
    path = root / "build.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


@pytest.fixture
def build_cfg(docs_tree):
    return {
        "run": {"run_id": "test_run", "out_dir": str(docs_tree / "out")},
        "sources": [
            {"name": "handbook", "kind": "markdown_files", "dataset": str(docs_tree / "docs")},
            {"name": "tickets", "kind": "local_jsonl", "dataset": str(docs_tree / "tickets.jsonl"), "text_field": "body"},
        ],
    }


class TestConfig:

    def test_valid_config_round_trips(self, docs_tree, build_cfg):
        path = _write_config(docs_tree, build_cfg)
        assert load_build_config(str(path)) == build_cfg

    @pytest.mark.parametrize("cfg,message", [
        ([], "mapping"),
        ({"sources": [{"name": "a", "kind": "b", "dataset": "c"}]}, "run.out_dir"),
        ({"run": {"out_dir": "o"}}, "at least one"),
        ({"run": {"out_dir": "o"}, "sources": [{"name": "a", "kind": "b"}]}, "dataset"),
        ({"run": {"out_dir": "o"}, "sources": [{"name": "a", "kind": "b", "dataset": "c"}] * 2}, "duplicate source names"),
    ])
    def test_invalid_config(self, cfg, message):
        with pytest.raises(ValueError, match=message):
            validate_build_config(cfg)

    def test_run_id(self):
        assert resolve_run_id({"run": {"run_id": "fixed"}}) == "fixed"
        generated = resolve_run_id({"run": {}, "sources": [{"name": "my docs"}]})
        assert generated.startswith("my_docs_")


class TestBuildLocal:

    def test_outputs_and_manifest(self, docs_tree, build_cfg):
        manifest = build_local(build_cfg, "test_run", progress=False)
        out = docs_tree / "out"

        assert (out / "handbook" / "a.txt").read_text(encoding="utf-8") == "■ Alpha\n\n【bold】"
        assert (out / "handbook" / "sub" / "b.txt").read_text(encoding="utf-8") == "☐ todo"
        assert not (out / "handbook" / "notes.txt").exists()

        rows = [json.loads(l) for l in (out / "tickets.jsonl").read_text(encoding="utf-8").splitlines()]
        assert [r["plain_text"] for r in rows] == ["https://google.com (Google)", "~old~ new"]
        assert rows[0]["body"] == "[Google](https://google.com)"

        assert manifest["total_converted_docs"] == 4
        assert manifest["total_failed_docs"] == 0
        assert manifest["sources"]["tickets"]["converted"] == 2
        on_disk = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
        assert on_disk["run_id"] == "test_run"

    def test_unknown_source_key(self, build_cfg):
        build_cfg["sources"][0]["colour"] = "red"
        with pytest.raises(ValueError, match="unknown keys"):
            build_local(build_cfg, "r", progress=False)

    def test_same_stem_keeps_suffix(self, tmp_path):
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "a.md").write_text("## D", encoding="utf-8")
        (docs / "a.markdown").write_text("## M", encoding="utf-8")
        cfg = {
            "run": {"out_dir": str(tmp_path / "out")},
            "sources": [{"name": "docs", "kind": "markdown_files", "dataset": str(docs)}],
        }
        manifest = build_local(cfg, "r", progress=False)

        out = tmp_path / "out" / "docs"
        assert manifest["sources"]["docs"]["converted"] == 2
        assert sorted(p.name for p in out.iterdir()) == ["a.md.txt", "a.txt"]
        assert {p.read_text(encoding="utf-8") for p in out.iterdir()} == {"■ D", "■ M"}

    def test_unresolvable_collision_counts_as_failed(self, tmp_path):
        roots = []
        for i in range(3):
            root = tmp_path / f"r{i}"
            root.mkdir()
            (root / "x.md").write_text(f"## {i}", encoding="utf-8")
            roots.append(str(root))
        cfg = {
            "run": {"out_dir": str(tmp_path / "out")},
            "sources": [{"name": "docs", "kind": "markdown_files", "dataset": roots}],
        }
        manifest = build_local(cfg, "r", progress=False)

        out = tmp_path / "out" / "docs"
        assert manifest["sources"]["docs"]["converted"] == 2
        assert manifest["total_failed_docs"] == 1
        assert (out / "x.txt").read_text(encoding="utf-8") == "■ 0"
        assert (out / "x.md.txt").read_text(encoding="utf-8") == "■ 1"


class TestCLI:

    def test_convert_file_to_stdout(self, tmp_path, capsys):
        src = tmp_path / "in.md"
        src.write_text("## Hi\n", encoding="utf-8")
        assert main(["convert", str(src)]) == 0
        assert capsys.readouterr().out == "■ Hi\n"

    def test_convert_to_file(self, tmp_path):
        src = tmp_path / "in.md"
        src.write_text("**x**", encoding="utf-8")
        dst = tmp_path / "out.txt"
        assert main(["convert", str(src), "-o", str(dst)]) == 0
        assert dst.read_text(encoding="utf-8") == "【x】\n"

    def test_missing_input(self, tmp_path):
        assert main(["convert", str(tmp_path / "missing.md")]) == 1

    def test_stages_listing(self, capsys):
        assert main(["stages"]) == 0
        out = capsys.readouterr().out
        assert "fenced_code" in out
        assert "unordered_list" in out

    def test_trace(self, tmp_path, capsys):
        src = tmp_path / "in.md"
        src.write_text("**x**", encoding="utf-8")
        assert main(["trace", str(src), "--stage", "emphasis"]) == 0
        assert "emphasis" in capsys.readouterr().out

    def test_build(self, docs_tree, build_cfg):
        path = _write_config(docs_tree, build_cfg)
        assert main(["build", "--config", str(path), "--no-progress"]) == 0
        assert (docs_tree / "out" / "manifest.json").exists()

    def test_build_bad_config(self, tmp_path):
        path = _write_config(tmp_path, {"run": {}})
        assert main(["build", "--config", str(path)]) == 1
