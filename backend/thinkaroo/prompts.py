from __future__ import annotations
import logging
import tomllib
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class PromptText(BaseModel):
	text: str


class PromptConfig(BaseModel):
	name: str
	description: str
	model: str
	system_context: str
	prompt: PromptText


def load_prompts(directory: Path) -> Dict[str, PromptConfig]:
	"""Read every ``*.toml`` file in ``directory`` keyed by file stem.

	Files that cannot be parsed are logged and skipped so one bad prompt
	never keeps the server from starting.
	"""
	prompts: Dict[str, PromptConfig] = {}
	if not directory.is_dir():
		logger.warning("Prompt directory %s does not exist", directory)
		return prompts
	for path in sorted(directory.glob("*.toml")):
		if not path.is_file():
			continue
		try:
			with path.open("rb") as fh:
				data = tomllib.load(fh)
			prompts[path.stem] = PromptConfig.model_validate(data)
		except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
			logger.error("Failed to parse prompt file %s: %s", path, e)
	return prompts


class PromptCatalog:
	def __init__(self, prompts: Optional[Dict[str, PromptConfig]] = None) -> None:
		self._prompts: Dict[str, PromptConfig] = dict(prompts or {})

	@classmethod
	def from_directory(cls, directory: Path) -> "PromptCatalog":
		return cls(load_prompts(directory))

	def get(self, name: str) -> Optional[PromptConfig]:
		return self._prompts.get(name)

	def names(self) -> List[str]:
		return sorted(self._prompts)

	def __len__(self) -> int:
		return len(self._prompts)

	def __contains__(self, name: object) -> bool:
		return name in self._prompts
