"""Unit tests for the CLI: Typer command registration and basic behavior.

Exercises CLI app registration, help output, and each command via
typer.testing.CliRunner.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from configcell.cli.app import app
from configcell.core.orchestrator import Orchestrator
from configcell.models.profiles import MAINNET, TESTNET

from conftest import write_lines

runner = CliRunner()


# ---------------------------------------------------------------------------
# Test: CLI help and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    """The CLI must register all expected commands and show help."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer's no_args_is_help may exit with 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert "usage" in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "affected" in result.output
        assert "bloom-check" in result.output
        assert "profiles" in result.output

    def test_generate_help(self):
        result = runner.invoke(app, ["generate", "--help"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# Test: generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_prints_manifest_line(self, data_dir: Path):
        result = runner.invoke(
            app, ["generate", "--profile", "testnet", "--data-dir", str(data_dir)]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == Orchestrator(TESTNET, data_dir).generate()

    def test_mainnet_profile(self, data_dir: Path):
        result = runner.invoke(
            app, ["generate", "-p", "mainnet", "-d", str(data_dir)]
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == Orchestrator(MAINNET, data_dir).generate()

    def test_section_filter(self, data_dir: Path):
        result = runner.invoke(
            app,
            ["generate", "-d", str(data_dir), "-s", "apply", "-s", "account"],
        )
        assert result.exit_code == 0, result.output
        assert len(result.output.strip().split(",")) == 2

    def test_missing_input_exits_1(self, tmp_path: Path):
        result = runner.invoke(app, ["generate", "--data-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Generation aborted" in result.output

    def test_undecodable_line_exits_1_unless_skipped(self, data_dir: Path):
        (data_dir / "record_key_namespace.txt").write_bytes(b"address.eth\n\xff\n")

        strict = runner.invoke(app, ["generate", "-d", str(data_dir)])
        assert strict.exit_code == 1

        lenient = runner.invoke(
            app, ["generate", "-d", str(data_dir), "--skip-undecodable"]
        )
        assert lenient.exit_code == 0
        assert "0x" in lenient.output

    def test_unknown_profile_exits_2(self, data_dir: Path):
        result = runner.invoke(app, ["generate", "-p", "devnet", "-d", str(data_dir)])
        assert result.exit_code == 2

    def test_unknown_section_exits_2(self, data_dir: Path):
        result = runner.invoke(app, ["generate", "-d", str(data_dir), "-s", "nope"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Test: affected, bloom-check, profiles
# ---------------------------------------------------------------------------


class TestAffectedCommand:
    def test_prints_type_tags(self, data_dir: Path, tmp_path: Path):
        accounts = write_lines(tmp_path / "new.txt", ["google"])
        groups = Orchestrator(TESTNET, data_dir).affected_shards(["google"])
        (index,) = groups

        result = runner.invoke(app, ["affected", str(accounts)])

        assert result.exit_code == 0, result.output
        assert "0x" + (10000 + index).to_bytes(4, "little").hex() in result.output

    def test_missing_accounts_file(self, tmp_path: Path):
        result = runner.invoke(app, ["affected", str(tmp_path / "none.txt")])
        assert result.exit_code == 1


class TestBloomCheckCommand:
    def test_inserted_items_present(self, data_dir: Path):
        result = runner.invoke(
            app, ["bloom-check", "google", "apple", "-d", str(data_dir)]
        )
        assert result.exit_code == 0, result.output
        assert "google\tpresent" in result.output
        assert "apple\tpresent" in result.output

    def test_missing_filter_file(self, tmp_path: Path):
        result = runner.invoke(app, ["bloom-check", "google", "-d", str(tmp_path)])
        assert result.exit_code == 1


class TestProfilesCommand:
    def test_lists_profiles(self):
        result = runner.invoke(app, ["profiles"])
        assert result.exit_code == 0
        assert "mainnet" in result.output
        assert "testnet" in result.output
