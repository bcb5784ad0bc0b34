"""
Unit tests for CLI functionality.

Tests the cssm command-line interface commands: classnames, resolve, hover,
definition, complete and settings.
"""

import json
import logging

import pytest
from click.testing import CliRunner
from rich.console import Console

from css_modules_context import __version__
from css_modules_context.cli import main

STYLESHEET = "/* wrapper */\n.container { display: flex; }\n.title-text { color: red; }\n"

COMPONENT = (
    "import styles from './App.module.css'\n"
    "\n"
    "const a = styles.container\n"
    "const b = styles.ti\n"
)


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Restore root logging and drop CSS_MODULES_* overrides around each test"""
    for name in ("CSS_MODULES_CAMEL_CASE", "CSS_MODULES_LOG_LEVEL", "CSS_MODULES_STRICT_PARSING"):
        monkeypatch.delenv(name, raising=False)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path):
    (tmp_path / "App.module.css").write_text(STYLESHEET)
    component = tmp_path / "App.tsx"
    component.write_text(COMPONENT)
    return tmp_path


class TestMainGroup:
    """Test group level options"""

    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert f"cssm, version {__version__}" in result.output

    def test_help_lists_commands(self):
        result = self.runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        for command in ("classnames", "resolve", "hover", "definition", "complete", "settings"):
            assert command in result.output

    def test_invalid_camel_case(self, project):
        result = self.runner.invoke(main, ['--camel-case', 'kebab', 'settings'])

        assert result.exit_code == 2

    def test_invalid_environment_settings(self, monkeypatch):
        monkeypatch.setenv("CSS_MODULES_LOG_LEVEL", "LOUD")

        result = self.runner.invoke(main, ['settings'])

        assert result.exit_code == 2
        assert "Invalid settings" in result.output


class TestClassnamesCommand:
    """Test the classnames command"""

    def setup_method(self):
        self.runner = CliRunner()

    def test_lists_index(self, project):
        result = self.runner.invoke(main, ['classnames', str(project / "App.module.css")])

        assert result.exit_code == 0
        assert ".container" in result.output
        assert ".titleText" in result.output
        assert "2 class names" in result.output

    def test_camel_case_disabled(self, project):
        result = self.runner.invoke(
            main, ['--camel-case', 'disabled', 'classnames', str(project / "App.module.css")]
        )

        assert result.exit_code == 0
        assert ".title-text" in result.output

    def test_missing_file(self, tmp_path):
        result = self.runner.invoke(main, ['classnames', str(tmp_path / "missing.css")])

        assert result.exit_code != 0

    def test_strict_parsing_failure(self, tmp_path, monkeypatch):
        broken = tmp_path / "broken.css"
        broken.write_text(".a { color: red; \n.b {{{ \n")
        monkeypatch.setenv("CSS_MODULES_STRICT_PARSING", "true")

        result = self.runner.invoke(main, ['classnames', str(broken)])

        assert result.exit_code == 1
        assert "Failed to index" in result.output


class TestResolveCommand:
    """Test the resolve command"""

    def setup_method(self):
        self.runner = CliRunner()

    def test_relative_import(self, project):
        result = self.runner.invoke(main, ['resolve', str(project / "App.tsx"), 'styles'])

        assert result.exit_code == 0
        assert result.output.strip() == str(project / "App.module.css")

    def test_aliased_import(self, tmp_path):
        (tmp_path / "tsconfig.json").write_text(json.dumps({
            "compilerOptions": {"baseUrl": ".", "paths": {"@styles/*": ["./styles/*"]}},
        }))
        (tmp_path / "styles").mkdir()
        (tmp_path / "styles" / "a.css").write_text(".a {}\n")
        component = tmp_path / "App.tsx"
        component.write_text("import s from '@styles/a.css'\n")

        result = self.runner.invoke(main, ['resolve', str(component), 's'])

        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "styles" / "a.css")

    def test_unbound_identifier(self, project):
        result = self.runner.invoke(main, ['resolve', str(project / "App.tsx"), 'other'])

        assert result.exit_code == 1
        assert "Cannot resolve" in result.output


class TestProviderCommands:
    """Test hover, definition and complete"""

    def setup_method(self):
        self.runner = CliRunner()

    def test_hover(self, project):
        result = self.runner.invoke(
            main, ['--camel-case', 'disabled', 'hover', str(project / "App.tsx"), '2', '20']
        )

        assert result.exit_code == 0
        assert result.output == "/*wrapper */\n.container {\n  display: flex;\n}\n"

    def test_hover_nothing(self, project):
        result = self.runner.invoke(main, ['hover', str(project / "App.tsx"), '1', '0'])

        assert result.exit_code == 1
        assert "No hover information" in result.output

    def test_definition_of_class(self, project):
        result = self.runner.invoke(main, ['definition', str(project / "App.tsx"), '2', '20'])

        assert result.exit_code == 0
        assert result.output.strip() == f"{project / 'App.module.css'}:1:1"

    def test_definition_of_import(self, project):
        result = self.runner.invoke(main, ['definition', str(project / "App.tsx"), '0', '25'])

        assert result.exit_code == 0
        assert result.output.strip() == f"{project / 'App.module.css'}:0:0"

    def test_definition_nothing(self, project):
        result = self.runner.invoke(main, ['definition', str(project / "App.tsx"), '1', '0'])

        assert result.exit_code == 1

    def test_complete(self, project):
        result = self.runner.invoke(main, ['complete', str(project / "App.tsx"), '3', '19'])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["titleText"]

    def test_negative_position_rejected(self, project):
        result = self.runner.invoke(main, ['hover', str(project / "App.tsx"), '-1', '0'])

        assert result.exit_code == 2


class TestSettingsCommand:
    """Test the settings command"""

    @pytest.fixture(autouse=True)
    def wide_console(self, monkeypatch):
        monkeypatch.setattr("css_modules_context.cli.console", Console(width=200))

    def setup_method(self):
        self.runner = CliRunner()

    def test_shows_defaults(self):
        result = self.runner.invoke(main, ['settings'])

        assert result.exit_code == 0
        assert "camel_case" in result.output
        assert "CSS_MODULES_CAMEL_CASE" in result.output

    def test_reflects_environment(self, monkeypatch):
        monkeypatch.setenv("CSS_MODULES_CAMEL_CASE", "dashes")

        result = self.runner.invoke(main, ['settings'])

        assert result.exit_code == 0
        assert "dashes" in result.output
