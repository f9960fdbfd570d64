# Area: Shared Tests
"""Tests for the command-line interface."""

import importlib
import json
import logging

import pytest

from board_game_scoring.cli import main, parse_args

MATCH = {
    "scoresheet": {"roundsScore": "Best Of", "winCondition": "Lowest Score"},
    "participants": [
        {"id": 1, "rounds": [7, 3]},
        {"id": 2, "rounds": [4, None]},
        {"id": 3, "rounds": []},
    ],
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("SCORING_LOG_LEVEL", "SCORING_LOG_FILE", "SCORING_JSON_INDENT"):
        monkeypatch.delenv(key, raising=False)
    yield
    pkg_logger = logging.getLogger("board_game_scoring")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def match_file(tmp_path):
    path = tmp_path / "match.json"
    path.write_text(json.dumps(MATCH), encoding="utf-8")
    return path


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults(self):
        args = parse_args(["match.json"])
        assert args.match_file == "match.json"
        assert args.mode == "results"
        assert args.quiet is False

    def test_invalid_mode(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["match.json", "--mode", "bogus"])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for main()."""

    def test_results_to_stdout(self, match_file, capsys):
        assert main([str(match_file), "--quiet"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["winners"] == [1]
        assert [(r["id"], r["placement"]) for r in report["results"]] == [(1, 1), (2, 2), (3, 3)]
        assert report["requiresTieBreaker"] is False

    def test_placements_mode(self, match_file, capsys):
        assert main([str(match_file), "--mode", "placements", "--quiet"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["placements"][0] == {"id": 1, "score": 3, "placement": 1}

    def test_output_file(self, match_file, tmp_path, capsys):
        out_path = tmp_path / "out" / "results.json"
        assert main([str(match_file), "--mode", "final-scores", "--output", str(out_path), "--quiet"]) == 0
        written = json.loads(out_path.read_text(encoding="utf-8"))
        assert written == json.loads(capsys.readouterr().out)
        assert written["finalScores"][2] == {"id": 3, "score": None, "teamId": None}

    def test_logs_go_to_stderr(self, match_file, capsys):
        assert main([str(match_file), "--log-level", "INFO"]) == 0
        captured = capsys.readouterr()
        assert "Scoring 3 participants" in captured.err
        json.loads(captured.out)

    def test_log_file(self, match_file, tmp_path, capsys):
        log_path = tmp_path / "scoring.log"
        assert main([str(match_file), "--log-file", str(log_path), "--quiet"]) == 0
        assert "Scoring 3 participants" in log_path.read_text(encoding="utf-8")

    def test_missing_match_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Match file not found" in capsys.readouterr().err

    def test_invalid_match(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"scoresheet": {"roundsScore": "Sometimes"}}), encoding="utf-8")
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert "INVALID_MATCH" in err

    def test_invalid_config(self, match_file, capsys, monkeypatch):
        monkeypatch.setenv("SCORING_LOG_LEVEL", "LOUD")
        assert main([str(match_file)]) == 1
        assert "INVALID_CONFIG" in capsys.readouterr().err

    def test_indent_from_env(self, match_file, capsys, monkeypatch):
        monkeypatch.setenv("SCORING_JSON_INDENT", "0")
        assert main([str(match_file), "--quiet"]) == 0
        assert capsys.readouterr().out.strip().count("\n") == 0

    def test_unreadable_match_file(self, tmp_path, capsys):
        path = tmp_path / "match.json"
        path.write_bytes(b'{"scoresheet": "\xff\xfe"}')
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert "INVALID_MATCH" in err
        assert "Cannot read match file" in err

    def test_config_not_an_object(self, match_file, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text("[1, 2]", encoding="utf-8")
        assert main([str(match_file), "--config", str(config_path)]) == 1
        assert "INVALID_CONFIG" in capsys.readouterr().err


class TestModuleEntryPoint:
    """Tests for ``python -m board_game_scoring``."""

    def test_import_does_not_run_cli(self):
        module = importlib.import_module("board_game_scoring.__main__")
        assert module.main is main
