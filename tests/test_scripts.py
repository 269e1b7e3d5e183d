"""Tests for the developer scripts."""

import runpy
import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


class TestInspectExample:
    """Tests for scripts/inspect_example.py."""

    def _run(self, monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
        monkeypatch.setattr(sys, "argv", ["inspect_example.py", *args])
        runpy.run_path(str(SCRIPTS_DIR / "inspect_example.py"), run_name="__main__")

    def test_default_rules(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The cleaned output drops the device tagline."""
        message = tmp_path / "message.txt"
        message.write_text("Hi there\n\nSent from my iPhone", encoding="utf-8")

        self._run(monkeypatch, str(message))

        cleaned = capsys.readouterr().out.split("--- clean_text ---")[1]
        assert "Hi there" in cleaned
        assert "Sent from my iPhone" not in cleaned

    def test_custom_rules_reach_cleaned_output(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Replacement signature rules also apply to the cleaned output."""
        message = tmp_path / "message.txt"
        message.write_text("Hi there\n\nSent from my iPhone", encoding="utf-8")
        rules = tmp_path / "signatures.yaml"
        rules.write_text("name: none\nrules: []\n", encoding="utf-8")

        self._run(monkeypatch, str(message), "--signature-rules", str(rules))

        cleaned = capsys.readouterr().out.split("--- clean_text ---")[1]
        assert "Sent from my iPhone" in cleaned
