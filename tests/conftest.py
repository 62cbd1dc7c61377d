import pytest
from fastapi.testclient import TestClient

from thinkaroo.main import create_app
from thinkaroo.settings import Settings


READING_PROMPT = '''
name = "reading_comprehension"
description = "Story with questions"
model = "gpt-4o-mini"
system_context = "You write stories for children."

[prompt]
text = "Write a story."
'''


@pytest.fixture
def static_dir(tmp_path):
	d = tmp_path / "static"
	d.mkdir()
	(d / "home.html").write_text("<h1>Home</h1>", encoding="utf-8")
	(d / "reading.html").write_text("<h1>Reading</h1>", encoding="utf-8")
	return d


@pytest.fixture
def prompts_dir(tmp_path):
	d = tmp_path / "prompts"
	d.mkdir()
	(d / "reading_comprehension.toml").write_text(READING_PROMPT, encoding="utf-8")
	return d


@pytest.fixture
def settings(static_dir, prompts_dir):
	# Field aliases are the env var names, so overrides use them too
	return Settings(
		_env_file=None,
		HOST="127.0.0.1",
		PORT=0,
		LOG_LEVEL="info",
		STATIC_DIR=static_dir,
		PROMPTS_DIR=prompts_dir,
	)


@pytest.fixture
def client(settings):
	with TestClient(create_app(settings)) as c:
		yield c
