import textwrap
from pathlib import Path

import pytest

from textadventure.choices import ShakeDownChoice
from textadventure.settings import Settings


def test_defaults_load_from_packaged_yaml():
    settings = Settings.load()
    assert settings.prompts.shake_down_header == "Enter letter command: Give gnome"
    assert settings.prompts.invalid_command == "Invalid command"
    assert settings.logging.level == "INFO"
    keys = settings.keys.to_keys()
    assert keys.letters_for(ShakeDownChoice.FAKE) == ("F",)


def test_user_file_overlays_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text(
        textwrap.dedent(
            """
            prompts:
              invalid_command: "Try again"
            keys:
              mapping:
                gold: ["C"]
            """
        ),
        encoding="utf-8",
    )

    settings = Settings.load(user)

    assert settings.prompts.invalid_command == "Try again"
    # Untouched keys keep their defaults
    assert settings.prompts.shake_down_header == "Enter letter command: Give gnome"
    keys = settings.keys.to_keys()
    assert keys.letters_for(ShakeDownChoice.GOLD) == ("C",)
    assert keys.letters_for(ShakeDownChoice.EVERYTHING) == ("E",)


def test_missing_user_file_falls_back_to_defaults(tmp_path: Path):
    settings = Settings.load(tmp_path / "nope.yaml")
    assert settings.logging.level == "INFO"


def test_clashing_user_keys_fail_fast(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("keys:\n  mapping:\n    fake: ['E']\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Settings.load(user)


def test_save_round_trips(tmp_path: Path):
    settings = Settings.load()
    settings.logging.level = "DEBUG"
    target = tmp_path / "out" / "settings.yaml"

    settings.save(target)
    reloaded = Settings.load(target)

    assert reloaded.logging.level == "DEBUG"
    assert reloaded.keys.mapping == settings.keys.mapping
