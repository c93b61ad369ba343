"""Tests for the run_* command bodies."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brainlink.commands.graph_cmd import run_graph
from brainlink.commands.links_cmd import run_backlinks, run_outlinks, run_resolve
from brainlink.commands.lint import run_lint
from brainlink.commands.tags_cmd import run_tags


def test_graph_json_to_stdout(fixture_brain_path: Path, capsys) -> None:
    exit_code = run_graph(fixture_brain_path, fmt="json")

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["nodes"]) == 5
    assert len(payload["edges"]) == 4
    assert {"id", "title", "category", "linkCount", "size"} == set(payload["nodes"][0])


def test_graph_markdown_summary(fixture_brain_path: Path, capsys) -> None:
    run_graph(fixture_brain_path, fmt="md", top=2)

    text = capsys.readouterr().out
    assert "- Nodes: 5" in text
    assert "- Edges: 4" in text
    assert "- Isolated: 1" in text
    assert "| `concepts/dopamine` | Dopamine | 3 |" in text
    # top=2 keeps only the two most connected
    assert "reward-prediction` |" not in text


def test_graph_dot_file(fixture_brain_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "g.dot"
    run_graph(fixture_brain_path, fmt="dot", out=out)

    dot = out.read_text(encoding="utf-8")
    assert dot.startswith("graph brain {")
    assert '"concepts/dopamine" -- "concepts/serotonin";' in dot
    assert dot.count(" -- ") == 4


def test_graph_rich_to_file(fixture_brain_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "g.txt"
    run_graph(fixture_brain_path, fmt="rich", out=out)
    assert "Most connected" in out.read_text(encoding="utf-8")


def test_backlinks_json(fixture_brain_path: Path, capsys) -> None:
    assert run_backlinks(fixture_brain_path, "concepts/dopamine", output_json=True) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [b["slug"] for b in payload] == ["journals/2026-01-29", "research/reward-prediction"]
    assert "[[dopamine]]" in payload[0]["context"]


def test_outlinks_json(fixture_brain_path: Path, capsys) -> None:
    assert run_outlinks(fixture_brain_path, "journals/2026-01-29", output_json=True) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [(o["target"], o["exists"]) for o in payload] == [
        ("dopamine", True),
        ("2026-01-30", False),
        ("Serotonin pathways", True),
    ]


def test_resolve_reports_strategy(fixture_brain_path: Path, capsys) -> None:
    assert run_resolve(fixture_brain_path, "Serotonin pathways", output_json=True) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["slug"] == "concepts/serotonin"
    assert payload["strategy"] == "fuzzy"


def test_resolve_unknown_target(fixture_brain_path: Path, capsys) -> None:
    assert run_resolve(fixture_brain_path, "Quantum Gravity", output_json=True) == 1
    assert json.loads(capsys.readouterr().out)["slug"] is None


def test_lint_exit_codes(fixture_brain_path: Path, capsys) -> None:
    # Only warnings and info in the fixture
    assert run_lint(fixture_brain_path, fail_on="error", output_json=True) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["counts"] == {"error": 0, "warning": 2, "info": 2}

    assert run_lint(fixture_brain_path, fail_on="warning", output_json=True) == 1


def test_tags_json(fixture_brain_path: Path, capsys) -> None:
    assert run_tags(fixture_brain_path, output_json=True) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0] == {"name": "neuro", "count": 2, "documents": ["concepts/dopamine", "concepts/serotonin"]}


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def bracket_brain(tmp_path: Path) -> Path:
    """Notes whose text looks like rich markup."""
    brain = tmp_path / "brain"
    _write(brain / "concepts" / "serotonin.md", "---\ntitle: Serotonin\n---\n\nA neurotransmitter.\n")
    _write(brain / "concepts" / "dopamine.md", "---\ntitle: Dopamine\n---\n\nSee [[serotonin]] now.\n")
    _write(brain / "research" / "lists.md", "---\ntitle: Lists\n---\n\nList [/] then [[serotonin]].\n")
    _write(brain / "concepts" / "jotting.md", '---\ntitle: "Notes [draft]"\n---\n\n')
    _write(brain / "journals" / "2026-02-01.md", "---\ntitle: Feb 1\n---\n\n[[Notes]] and [[missing]]\n")
    return brain


def _flat(text: str) -> str:
    return " ".join(text.split())


def test_backlinks_table_keeps_link_brackets(bracket_brain: Path, capsys) -> None:
    assert run_backlinks(bracket_brain, "concepts/serotonin") == 0

    out = _flat(capsys.readouterr().out)
    assert "See [[serotonin]] now." in out
    assert "List [/] then [[serotonin]]." in out


def test_outlinks_table(bracket_brain: Path, capsys) -> None:
    assert run_outlinks(bracket_brain, "journals/2026-02-01") == 0

    out = _flat(capsys.readouterr().out)
    assert "concepts/jotting" in out
    assert "missing" in out


def test_resolve_prints_bracketed_title(bracket_brain: Path, capsys) -> None:
    assert run_resolve(bracket_brain, "Notes") == 0

    out = _flat(capsys.readouterr().out)
    assert "concepts/jotting (Notes [draft]) via fuzzy match" in out


def test_lint_human_output(bracket_brain: Path, capsys) -> None:
    assert run_lint(bracket_brain) == 0

    err = _flat(capsys.readouterr().err)
    assert "WARNING: [broken-link] journals/2026-02-01:1 - Link to non-existent document 'missing'" in err
    assert "INFO: [fuzzy-link] journals/2026-02-01:1" in err
    assert "(Notes [draft])" in err
