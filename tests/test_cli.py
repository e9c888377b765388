# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Batch CLI Tests
# ──────────────────────────────────────────────────────────────────────

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

import snepslog.cli as cli_mod


@pytest.fixture(autouse=True)
def _restore_snepslog_logger():
    logger = logging.getLogger("snepslog")
    old_handlers = list(logger.handlers)
    old_level = logger.level
    yield
    logger.handlers[:] = old_handlers
    logger.setLevel(old_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("SNEPSLOG_MODE", raising=False)
    monkeypatch.delenv("SNEPSLOG_PRINTING_MODE", raising=False)


def _write(tmp_path, payload) -> str:
    path = tmp_path / "terms.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_compiles_descriptors_in_order(tmp_path) -> None:
    path = _write(
        tmp_path,
        [
            {"category": "negated", "arg": "p"},
            {"category": "set", "kind": "or", "args": [{"category": "negated", "arg": "p"}, "q"]},
        ],
    )
    result = CliRunner().invoke(cli_mod.cli, [path])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["M1", "M2"]


def test_expert_printing_mode_shows_frame_and_wires(tmp_path) -> None:
    path = _write(tmp_path, {"category": "negated", "arg": "p"})
    result = CliRunner().invoke(cli_mod.cli, [path, "--printing-mode", "expert"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "M1! andOrRule(Proposition: arg max min) arg:p max:0 min:0"


def test_unlabeled_printing_mode_from_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SNEPSLOG_PRINTING_MODE", "unlabeled")
    path = _write(tmp_path, {"category": "negated", "arg": "p"})
    result = CliRunner().invoke(cli_mod.cli, [path])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "M1 (p 0 0)"


def test_mode_three_session(tmp_path) -> None:
    path = _write(
        tmp_path,
        [
            {"category": "define-relation", "name": "member", "semantic": "Entity"},
            {"category": "define-relation", "name": "class", "semantic": "Entity"},
            {"category": "define-frame", "semantic": "Proposition", "name": "Isa",
             "relations": "(nil member class)"},
            {"category": "atomic", "predicate": "Isa", "args": ["Fido", "Dog"]},
        ],
    )
    result = CliRunner().invoke(cli_mod.cli, [path, "--mode", "3", "--summary"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:4] == [
        "relation member: Entity",
        "relation class: Entity",
        "Isa: Proposition (member class)",
        "M1",
    ]
    assert "member:Fido class:Dog" in result.output


def test_frame_sharing_relations_echoes_its_own_name(tmp_path) -> None:
    path = _write(
        tmp_path,
        [
            {"category": "define-relation", "name": "r1"},
            {"category": "define-relation", "name": "r2"},
            {"category": "define-frame", "semantic": "Proposition", "name": "A",
             "relations": "(r1 r2)"},
            {"category": "define-frame", "semantic": "Proposition", "name": "B",
             "relations": "(r2 r1)"},
            {"category": "atomic", "predicate": "B", "args": ["x"]},
        ],
    )
    result = CliRunner().invoke(cli_mod.cli, [path, "--mode", "3", "--printing-mode", "unlabeled"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[2:] == [
        "A: Proposition (r1 r2)",
        "B: Proposition (r2 r1)",
        "M1 (B x)",
    ]


def test_fail_fast_stops_after_first_failure(tmp_path) -> None:
    path = _write(
        tmp_path,
        [
            {"category": "act", "action": "a", "objects": [[f"o{k}" for k in range(11)]]},
            {"category": "negated", "arg": "p"},
        ],
    )
    result = CliRunner().invoke(cli_mod.cli, [path])

    assert result.exit_code != 0
    assert "One or more descriptors failed: #1" in result.output
    assert "M1" not in result.output


def test_continue_on_error_runs_remaining_descriptors(tmp_path) -> None:
    path = _write(
        tmp_path,
        [
            {"category": "act", "action": "a", "objects": []},
            {"category": "negated", "arg": "p"},
        ],
    )
    result = CliRunner().invoke(cli_mod.cli, [path, "--continue-on-error"])

    assert result.exit_code != 0
    assert "M1" in result.output
    assert "#1" in result.output


def test_invalid_json_reports_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    result = CliRunner().invoke(cli_mod.cli, [str(path)])

    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_unknown_mode_rejected(tmp_path) -> None:
    path = _write(tmp_path, {"category": "negated", "arg": "p"})
    result = CliRunner().invoke(cli_mod.cli, [path, "--mode", "5"])

    assert result.exit_code == 1
    assert "Unknown mode 5" in result.output


def test_json_logs_flag(tmp_path) -> None:
    path = _write(tmp_path, {"category": "negated", "arg": "p"})
    result = CliRunner().invoke(cli_mod.cli, [path, "--json-logs", "--log-level", "info"])

    assert result.exit_code == 0, result.output
    assert "M1" in result.output
    assert logging.getLogger("snepslog").level == logging.INFO


def test_main_returns_click_exit_code(tmp_path, monkeypatch) -> None:
    path = _write(tmp_path, {"category": "act", "action": "a", "objects": []})
    monkeypatch.setattr("sys.argv", ["snepslog-compile", path])
    assert cli_mod.main() == 1


def test_main_returns_zero_on_success(tmp_path, monkeypatch) -> None:
    path = _write(tmp_path, {"category": "negated", "arg": "p"})
    monkeypatch.setattr("sys.argv", ["snepslog-compile", path])
    assert cli_mod.main() == 0
