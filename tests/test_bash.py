"""Tests for bash postscript rendering."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from notion.shell import Activate, Deactivate, Shell, ShellKind, ToolVersion
from notion.shell import bash


@pytest.fixture
def shell(tmp_path):
    return Shell(kind=ShellKind.BASH, postscript_path=tmp_path / "postscript.sh")


@pytest.fixture
def escaping_shell(tmp_path):
    return Shell(
        kind=ShellKind.BASH,
        postscript_path=tmp_path / "postscript.sh",
        escape_quotes=True,
    )


class TestCompilePostscript:
    """Exact output of each intent."""

    def test_deactivate(self, shell):
        assert (
            shell.compile_postscript(Deactivate("some:path"))
            == "export PATH='some:path'\nunset NOTION_HOME\n"
        )

    def test_activate(self, shell):
        assert (
            shell.compile_postscript(Activate("some:path"))
            == "export PATH='some:path'\nexport NOTION_HOME=\"${HOME}/.notion\"\n"
        )

    def test_activate_home_is_not_resolved(self, shell):
        text = shell.compile_postscript(Activate("/x"))
        assert "${HOME}" in text
        assert str(Path.home()) not in text

    def test_tool_version(self, shell):
        assert (
            shell.compile_postscript(ToolVersion.parse("node", "16.2.0"))
            == "export NOTION_NODE_VERSION=16.2.0\n"
        )

    def test_tool_version_uses_canonical_string(self, shell):
        assert (
            shell.compile_postscript(ToolVersion.parse("test", "2.4.5-rc.1+sha.abc"))
            == "export NOTION_TEST_VERSION=2.4.5-rc.1+sha.abc\n"
        )

    @pytest.mark.parametrize("intent", [
        Activate("/a:/b"),
        Deactivate("/a:/b"),
        ToolVersion.parse("node", "16.2.0"),
    ])
    def test_single_trailing_newline(self, shell, intent):
        text = shell.compile_postscript(intent)
        assert text.endswith("\n")
        assert not text.endswith("\n\n")
        assert "\n\n" not in text

    @pytest.mark.parametrize("intent", [
        Activate("/a:/b"),
        Deactivate("/a:/b"),
        ToolVersion.parse("node", "16.2.0"),
    ])
    def test_deterministic(self, shell, intent):
        assert shell.compile_postscript(intent) == shell.compile_postscript(intent)

    def test_only_export_and_unset_statements(self, shell):
        for intent in [Activate("/a"), Deactivate("/a"), ToolVersion.parse("node", "1.0.0")]:
            for line in shell.compile_postscript(intent).splitlines():
                assert line.startswith(("export ", "unset "))

    def test_unknown_intent_is_type_error(self, shell):
        with pytest.raises(TypeError):
            shell.compile_postscript("export FOO=bar")


class TestSingleQuotes:
    """Single quotes inside PATH values."""

    def test_quotes_not_escaped_by_default(self, shell):
        """Unescaped quotes close the quoted string early; kept for compatibility."""
        assert (
            shell.compile_postscript(Deactivate("/path:/with:/single'quotes'"))
            == "export PATH='/path:/with:/single'quotes''\nunset NOTION_HOME\n"
        )

    def test_quotes_escaped_when_enabled(self, escaping_shell):
        assert (
            escaping_shell.compile_postscript(Deactivate("/path:with:a'quote"))
            == "export PATH='/path:with:a'\"'\"'quote'\nunset NOTION_HOME\n"
        )

    def test_escaping_does_not_touch_versions(self, escaping_shell):
        assert (
            escaping_shell.compile_postscript(ToolVersion.parse("node", "16.2.0"))
            == "export NOTION_NODE_VERSION=16.2.0\n"
        )


def test_module_compile_matches_shell(shell):
    intent = Activate("/a")
    assert bash.compile_postscript(intent) == shell.compile_postscript(intent)


BASH = shutil.which("bash")


@pytest.mark.skipif(BASH is None, reason="bash is not installed")
class TestSourcing:
    """Source the generated text in a real bash."""

    def _source(self, tmp_path, text, before=""):
        script = tmp_path / "postscript.sh"
        script.write_text(text)
        command = (
            f"{before}\n"
            f". '{script}'\n"
            f". '{script}'\n"
            'printf "%s\\n" "$PATH" "${NOTION_HOME-<unset>}" "${NOTION_NODE_VERSION-<unset>}"\n'
        )
        result = subprocess.run(
            [BASH, "--noprofile", "--norc", "-c", command],
            env={"HOME": str(tmp_path), "PATH": os.environ.get("PATH", "")},
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.splitlines()

    def test_deactivate_restores_path_and_unsets_home(self, shell, tmp_path):
        text = shell.compile_postscript(Deactivate("/usr/bin:/a b/$x:/c"))
        path, home, _ = self._source(tmp_path, text, before="export NOTION_HOME=/old")
        assert path == "/usr/bin:/a b/$x:/c"
        assert home == "<unset>"

    def test_activate_sets_home_from_home_dir(self, shell, tmp_path):
        text = shell.compile_postscript(Activate("/notion/bin:/usr/bin"))
        path, home, _ = self._source(tmp_path, text)
        assert path == "/notion/bin:/usr/bin"
        assert home == f"{tmp_path}/.notion"

    def test_tool_version(self, shell, tmp_path):
        text = shell.compile_postscript(ToolVersion.parse("node", "16.2.0"))
        _, _, version = self._source(tmp_path, text)
        assert version == "16.2.0"

    def test_escaped_quote_round_trips(self, escaping_shell, tmp_path):
        text = escaping_shell.compile_postscript(Deactivate("/path:with:a'quote"))
        path, _, _ = self._source(tmp_path, text)
        assert path == "/path:with:a'quote"
