"""Tests for the shell registry."""

from pathlib import Path

import pytest

from notion.errors import UnrecognizedShell
from notion.shell import Shell, ShellInfo, ShellKind, ShellRegistry


class TestShellKind:
    """Tests for the shell family enum."""

    def test_bash(self):
        assert ShellKind.BASH.value == "bash"
        assert ShellKind("bash") is ShellKind.BASH

    def test_only_bash_supported(self):
        assert [kind.value for kind in ShellKind] == ["bash"]


class TestShellRegistry:
    """Tests for ShellRegistry."""

    def test_names(self):
        assert ShellRegistry().names() == ["bash"]

    def test_get(self):
        info = ShellRegistry().get("bash")
        assert isinstance(info, ShellInfo)
        assert info.kind is ShellKind.BASH
        assert info.name == "bash"
        assert info.postscript_filename == "postscript.sh"

    def test_get_unknown(self):
        assert ShellRegistry().get("zsh") is None

    def test_lookup_is_case_sensitive(self):
        registry = ShellRegistry()
        assert "bash" in registry
        assert "Bash" not in registry
        assert "BASH" not in registry

    def test_every_kind_registered(self):
        registry = ShellRegistry()
        assert len(registry) == len(ShellKind)
        for kind in ShellKind:
            assert kind.value in registry

    def test_to_dict(self):
        data = ShellRegistry().get("bash").to_dict()
        assert data["name"] == "bash"
        assert data["postscript_filename"] == "postscript.sh"
        assert data["description"]

    def test_build(self, tmp_path):
        shell = ShellRegistry().build("bash", tmp_path)
        assert shell == Shell(
            kind=ShellKind.BASH,
            postscript_path=tmp_path / "postscript.sh",
        )

    def test_build_relative_dir_is_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        shell = ShellRegistry().build("bash", Path("tmp"))
        assert shell.postscript_path.is_absolute()
        assert shell.postscript_path == tmp_path / "tmp" / "postscript.sh"

    def test_build_escape_quotes(self, tmp_path):
        assert ShellRegistry().build("bash", tmp_path, escape_quotes=True).escape_quotes

    def test_build_unknown(self, tmp_path):
        with pytest.raises(UnrecognizedShell) as exc_info:
            ShellRegistry().build("fish", tmp_path)
        assert exc_info.value.name == "fish"
