from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .choices import ChoiceKeys

logger = logging.getLogger(__name__)


@dataclass
class PromptSettings:
    shake_down_header: str = "Enter letter command: Give gnome"
    invalid_command: str = "Invalid command"


@dataclass
class ChoiceKeySettings:
    mapping: Dict[str, List[str]] = field(
        default_factory=lambda: {"everything": ["E"], "gold": ["G"], "fake": ["F"]}
    )

    def to_keys(self) -> ChoiceKeys:
        return ChoiceKeys.from_mapping(self.mapping)


@dataclass
class LoggingSettings:
    level: str = "INFO"


@dataclass
class Settings:
    prompts: PromptSettings = field(default_factory=PromptSettings)
    keys: ChoiceKeySettings = field(default_factory=ChoiceKeySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        prompts = PromptSettings(**data.get("prompts", {}))
        defaults = ChoiceKeySettings().mapping
        mapping = {**defaults, **{str(k): list(v) for k, v in data.get("keys", {}).get("mapping", {}).items()}}
        keys = ChoiceKeySettings(mapping=mapping)
        # Fail early on clashing or malformed letters
        keys.to_keys()
        logging_ = LoggingSettings(**data.get("logging", {}))
        return Settings(prompts=prompts, keys=keys, logging=logging_)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        If user_path is provided and exists, its values are overlaid onto the
        defaults.
        """
        try:
            with resources.files("textadventure.data").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        data = {
            "prompts": dataclasses.asdict(self.prompts),
            "keys": {"mapping": {k: list(v) for k, v in self.keys.mapping.items()}},
            "logging": dataclasses.asdict(self.logging),
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.info("Saved settings to %s", path)
