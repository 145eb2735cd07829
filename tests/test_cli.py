# Area: CLI Tests
"""Tests for the fair-rps command-line entry point."""

import json
import logging
from unittest.mock import patch

import pytest

from fair_rps._config import ENV_MAPPINGS
from fair_rps._core.commitment import compute_digest
from fair_rps.cli import USAGE_EXAMPLE, build_parser, main, resolve_config
from fair_rps.errors import RandomSourceUnavailableError

KEY = bytes(range(32))


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run each test from an empty directory with a clean environment."""
    for env_key in list(ENV_MAPPINGS) + ["NO_COLOR"]:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    pkg_logger = logging.getLogger("fair_rps")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()


def feed_input(monkeypatch, lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


class TestArgumentParsing:
    """Tests for build_parser() and resolve_config()."""

    def test_positional_moves(self):
        args = build_parser().parse_args(["rock", "paper", "scissors"])
        assert args.moves == ["rock", "paper", "scissors"]
        assert args.verify is None

    def test_verify_takes_three_values(self):
        args = build_parser().parse_args(["--verify", "AB", "CD", "rock"])
        assert args.verify == ["AB", "CD", "rock"]

    def test_cli_overrides_config_file(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"moves": ["a", "b", "c"], "log_level": "ERROR"}), encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path), "-v", "--no-color", "x", "y", "z"])
        config = resolve_config(args)
        assert config.moves == ["x", "y", "z"]
        assert config.log_level == "INFO"
        assert config.color is False

    def test_moves_from_config_file(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"moves": ["a", "b", "c"]}), encoding="utf-8")
        config = resolve_config(build_parser().parse_args(["--config", str(path)]))
        assert config.moves == ["a", "b", "c"]


class TestInvalidMoveSets:
    """Invalid move lists abort with a non-zero exit code."""

    @pytest.mark.parametrize("argv", [
        [],
        ["rock"],
        ["rock", "paper"],
        ["rock", "paper", "scissors", "lizard"],
        ["a", "a", "b"],
    ])
    def test_exit_code_one(self, argv, capsys):
        assert main(argv) == 1
        err = capsys.readouterr().err
        assert "INVALID_MOVE_SET" in err
        assert USAGE_EXAMPLE in err

    def test_duplicate_reported(self, capsys):
        main(["a", "a", "b"])
        assert "duplicate moves: a" in capsys.readouterr().err

    def test_no_prompt_shown(self, capsys, monkeypatch):
        feed_input(monkeypatch, [])
        main(["a", "b"])
        assert "HMAC:" not in capsys.readouterr().out

    def test_bad_config_value(self, capsys, monkeypatch):
        monkeypatch.setenv("FAIR_RPS_COLOR", "sometimes")
        assert main(["a", "b", "c"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_unencodable_move_label(self, capsys):
        """Undecodable argv bytes arrive as lone surrogates."""
        assert main(["rock\udcff", "paper", "scissors"]) == 1
        err = capsys.readouterr().err
        assert "INVALID_MOVE_SET" in err
        assert "valid UTF-8" in err

    def test_malformed_config_file(self, capsys, tmp_path):
        path = tmp_path / "game.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["--config", str(path), "a", "b", "c"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_config_file_not_an_object(self, capsys, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps(["a", "b", "c"]), encoding="utf-8")
        assert main(["--config", str(path)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err


class TestPlayingThroughCli:
    """Tests for a full round driven through main()."""

    def test_round_output(self, capsys, monkeypatch):
        feed_input(monkeypatch, ["1"])
        with patch("fair_rps._core.session.random_index", return_value=1):
            assert main(["rock", "paper", "scissors", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("HMAC: ")
        assert "1 - rock" in out
        assert "Your move: rock" in out
        assert "Computer move: paper" in out
        assert "You win!" in out
        assert "HMAC key: " in out

    def test_printed_key_verifies_printed_hmac(self, capsys, monkeypatch):
        feed_input(monkeypatch, ["2"])
        assert main(["rock", "paper", "scissors"]) == 0
        lines = capsys.readouterr().out.splitlines()
        digest = next(l for l in lines if l.startswith("HMAC: ")).split(": ", 1)[1]
        key_hex = next(l for l in lines if l.startswith("HMAC key: ")).split(": ", 1)[1]
        computer = next(l for l in lines if l.startswith("Computer move: ")).split(": ", 1)[1]
        assert compute_digest(bytes.fromhex(key_hex), computer) == digest

    def test_exit_command(self, capsys, monkeypatch):
        feed_input(monkeypatch, ["0"])
        assert main(["rock", "paper", "scissors"]) == 0
        assert "HMAC key" not in capsys.readouterr().out

    def test_help_then_exit(self, capsys, monkeypatch):
        feed_input(monkeypatch, ["?", "0"])
        assert main(["rock", "paper", "scissors", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Help - Results from the user's point of view:" in out
        assert "v PC\\User >" in out

    def test_invalid_then_valid(self, capsys, monkeypatch):
        feed_input(monkeypatch, ["9", "abc", "3"])
        assert main(["rock", "paper", "scissors"]) == 0
        out = capsys.readouterr().out
        assert out.count("Invalid input. Please try again.") == 2
        assert "Your move: scissors" in out

    def test_keyboard_interrupt(self, monkeypatch):
        def interrupt(prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)
        assert main(["rock", "paper", "scissors"]) == 0

    def test_moves_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("FAIR_RPS_MOVES", "fire,water,earth")
        feed_input(monkeypatch, ["0"])
        assert main([]) == 0
        assert "1 - fire" in capsys.readouterr().out

    def test_log_file_written(self, tmp_path, monkeypatch):
        feed_input(monkeypatch, ["1"])
        log_path = tmp_path / "logs" / "game.log"
        assert main(["-v", "--log-file", str(log_path), "rock", "paper", "scissors"]) == 0
        records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        messages = [r["message"] for r in records]
        assert any(m.startswith("Committed to a move") for m in messages)
        assert any(m.startswith("Round resolved") for m in messages)

    def test_key_not_logged_before_reveal(self, tmp_path, monkeypatch):
        """At DEBUG the key appears only after the round is resolved."""
        feed_input(monkeypatch, ["1"])
        monkeypatch.setenv("FAIR_RPS_LOG_LEVEL", "DEBUG")
        log_path = tmp_path / "game.log"
        main(["--log-file", str(log_path), "rock", "paper", "scissors"])
        messages = [json.loads(line)["message"] for line in log_path.read_text(encoding="utf-8").splitlines()]
        resolved_at = next(i for i, m in enumerate(messages) if m.startswith("Round resolved"))
        assert all("HMAC key" not in m for m in messages[:resolved_at])
        assert any("HMAC key" in m for m in messages[resolved_at:])


class TestRandomSourceFailure:
    """A missing secure random source terminates the process."""

    def test_terminates(self, capsys):
        with patch(
            "fair_rps.cli.GameSession",
            side_effect=RandomSourceUnavailableError("no urandom"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["rock", "paper", "scissors"])
        assert exc_info.value.code == 1
        assert "RANDOM_SOURCE_UNAVAILABLE" in capsys.readouterr().err


class TestVerifyMode:
    """Tests for --verify."""

    def test_matching_reveal(self, capsys):
        digest = compute_digest(KEY, "paper")
        assert main(["--verify", digest, KEY.hex().upper(), "paper"]) == 0
        assert "Verified" in capsys.readouterr().out

    def test_mismatching_reveal(self, capsys):
        digest = compute_digest(KEY, "paper")
        assert main(["--verify", digest, KEY.hex().upper(), "rock"]) == 1
        assert "Mismatch" in capsys.readouterr().out

    def test_non_ascii_digest_is_mismatch(self, capsys):
        assert main(["--verify", "\u00e9", KEY.hex().upper(), "rock"]) == 1
        assert "Mismatch" in capsys.readouterr().out

    def test_unencodable_move_is_mismatch(self, capsys):
        digest = compute_digest(KEY, "rock")
        assert main(["--verify", digest, KEY.hex().upper(), "rock\udcff"]) == 1
        assert "Mismatch" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
