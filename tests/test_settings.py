from pathlib import Path

import pytest
from pydantic import ValidationError

from thinkaroo.settings import BASE_DIR, Settings

ENV_VARS = ("HOST", "PORT", "LOG_LEVEL", "STATIC_DIR", "PROMPTS_DIR")


@pytest.fixture
def clean_env(monkeypatch):
	for name in ENV_VARS:
		monkeypatch.delenv(name, raising=False)
	return monkeypatch


def test_defaults(clean_env):
	s = Settings(_env_file=None)
	assert s.host == "0.0.0.0"
	assert s.port == 8080
	assert s.log_level == "info"
	assert s.static_dir == BASE_DIR / "static"
	assert s.prompts_dir == BASE_DIR / "prompts"


def test_environment_overrides(clean_env, tmp_path):
	clean_env.setenv("HOST", "127.0.0.1")
	clean_env.setenv("PORT", "9090")
	clean_env.setenv("LOG_LEVEL", "debug")
	clean_env.setenv("STATIC_DIR", str(tmp_path))
	s = Settings(_env_file=None)
	assert (s.host, s.port, s.log_level) == ("127.0.0.1", 9090, "debug")
	assert s.static_dir == Path(tmp_path)


def test_env_file_is_read(clean_env, tmp_path):
	env_file = tmp_path / ".env"
	env_file.write_text("PORT=9191\nUNRELATED=1\n", encoding="utf-8")
	assert Settings(_env_file=env_file).port == 9191


@pytest.mark.parametrize("port", ["-1", "65536", "http"])
def test_invalid_port_rejected(clean_env, port):
	clean_env.setenv("PORT", port)
	with pytest.raises(ValidationError):
		Settings(_env_file=None)
