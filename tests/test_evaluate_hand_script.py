"""Tests for the evaluate_hand command-line script."""

import importlib.util
import json
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "evaluate_hand.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("evaluate_hand", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestEvaluateHandScript:
    def test_preflop_text(self, script, capsys) -> None:
        assert script.main(["As", "Ah"]) == 0
        out = capsys.readouterr().out
        assert "Win probability (approx.): 98.0%" in out
        assert "Best hand" not in out

    def test_board_json(self, script, capsys) -> None:
        assert script.main(["As", "Kh", "--board", "Qd", "Jc", "Ts", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hand"] == "Straight"
        assert data["category"] == 4
        assert data["tiebreaker"] == [12]
        assert data["equity"] == 0.72

    def test_opponents_discount(self, script, capsys) -> None:
        assert script.main(["As", "Ah", "--board", "Ad", "Ac", "2s", "--opponents", "2", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hand"] == "Four of a Kind"
        assert data["equity"] == pytest.approx(round(0.93 * 0.88, 4))

    def test_rejects_bad_card(self, script, capsys) -> None:
        assert script.main(["As", "Zz"]) == 2
        assert "Zz" in capsys.readouterr().err

    def test_rejects_negative_opponents(self, script, capsys) -> None:
        assert script.main(["As", "Kh", "--opponents", "-1"]) == 2

    def test_uses_config_file(self, script, capsys, tmp_path) -> None:
        path = tmp_path / "equity.json"
        path.write_text(json.dumps({"opponent_discount": 0.5}))
        args = ["As", "Ah", "--board", "Ad", "Ac", "2s", "--opponents", "2", "--json", "--config", str(path)]
        assert script.main(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["equity"] == pytest.approx(0.465)

    def test_rejects_duplicate_cards(self, script, capsys) -> None:
        assert script.main(["As", "Ah", "--board", "As", "Kd", "Qc"]) == 2
        assert "Duplicate card(s): As" in capsys.readouterr().err

    def test_duplicate_check_ignores_suit_case(self, script, capsys) -> None:
        assert script.main(["As", "AS", "--board", "Kd", "Qc", "2h"]) == 2
        assert "Duplicate" in capsys.readouterr().err

    def test_missing_config_file_warns(self, script, capsys, tmp_path) -> None:
        missing = tmp_path / "nope.json"
        assert script.main(["As", "Ah", "--json", "--config", str(missing)]) == 0
        captured = capsys.readouterr()
        assert "not found, using defaults" in captured.err
        assert json.loads(captured.out)["equity"] == 0.98
