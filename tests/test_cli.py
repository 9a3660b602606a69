import tomllib
from pathlib import Path

import pytest

from docsearch.config.settings import Settings
from docsearch.presentation import cli


@pytest.fixture
def chainlit_config() -> dict:
    path = cli.CHAINLIT_APP_ROOT / ".chainlit" / "config.toml"
    with path.open("rb") as f:
        return tomllib.load(f)


class TestChainlitConfig:

    def test_html_rendering_enabled(self, chainlit_config):
        assert chainlit_config["features"]["unsafe_allow_html"] is True

    def test_config_is_not_regenerated(self, chainlit_config):
        assert chainlit_config["meta"]["generated_by"]


class TestStartup:

    def test_env_points_chainlit_at_shipped_config(self, tmp_path):
        settings = Settings(search_index_path="build/search_index.js")

        env = cli.chainlit_env(settings)

        app_root = Path(env["CHAINLIT_APP_ROOT"])
        assert (app_root / ".chainlit" / "config.toml").is_file()
        assert Path(env["SEARCH_INDEX_PATH"]).is_absolute()
        assert env["SEARCH_INDEX_PATH"].endswith("search_index.js")

    def test_command_runs_chat_app(self):
        settings = Settings(chainlit_host="127.0.0.1", chainlit_port=8123)

        command = cli.chainlit_command(settings)

        assert command[1:4] == ["-m", "chainlit", "run"]
        assert command[4].endswith("chainlit_app.py")
        assert command[-4:] == ["--host", "127.0.0.1", "--port", "8123"]

    def test_startup_passes_env_to_chainlit(self, tmp_path, monkeypatch):
        path = tmp_path / "index.json"
        path.write_text('[{"location": "a.html", "title": "A", "category": "page", "text": "Alpha"}]', encoding="utf-8")
        monkeypatch.setattr(cli, "settings", Settings(search_index_path=str(path)))
        calls = []
        monkeypatch.setattr(cli.subprocess, "run", lambda command, env: calls.append((command, env)))

        cli.cmd_startup(None)

        assert len(calls) == 1
        command, env = calls[0]
        assert env["CHAINLIT_APP_ROOT"] == str(cli.CHAINLIT_APP_ROOT)
        assert env["SEARCH_INDEX_PATH"] == str(path.resolve())
