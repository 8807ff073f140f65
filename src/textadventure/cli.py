import argparse
import logging
from pathlib import Path

from .choices import ConsoleChoiceProvider, ScriptedChoiceProvider
from .context import EncounterContext
from .encounters import resolve_encounter
from .errors import ChoiceExhausted, PreconditionViolation, ScenarioError
from .logging_config import configure_logging
from .players import return_active, take_active
from .presentation import ConsolePresenter
from .scenario import load_scenario, save_scenario
from .settings import Settings

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="textadventure",
        description="Resolve text adventure encounters between players sharing a tile.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encounter", help="Resolve one encounter from a scenario file.")
    enc.add_argument("scenario", type=Path, help="Scenario YAML listing the players.")
    enc.add_argument(
        "--active",
        type=int,
        required=True,
        help="Index of the player who acts (0-based, in scenario order).",
    )
    enc.add_argument(
        "--choice",
        dest="choices",
        action="append",
        default=None,
        help="Scripted command letter; repeat for several prompts. Reads stdin when omitted.",
    )
    enc.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the resulting scenario YAML here.",
    )
    return parser.parse_args(argv)


def _build_context(settings: Settings, choices) -> EncounterContext:
    keys = settings.keys.to_keys()
    prompt_kwargs = dict(
        header=settings.prompts.shake_down_header,
        invalid_message=settings.prompts.invalid_command,
    )
    if choices:
        chooser = ScriptedChoiceProvider(choices, keys, output=print, **prompt_kwargs)
    else:
        chooser = ConsoleChoiceProvider(keys, **prompt_kwargs)
    return EncounterContext(chooser=chooser, presenter=ConsolePresenter())


def run_encounter(args, settings: Settings) -> int:
    try:
        players = load_scenario(args.scenario)
    except ScenarioError as exc:
        logger.error("%s", exc)
        return 2

    try:
        active = take_active(players, args.active)
    except IndexError as exc:
        logger.error("%s", exc)
        return 2

    context = _build_context(settings, args.choices)
    try:
        active = resolve_encounter(active, players, context)
    except ChoiceExhausted as exc:
        logger.error("%s", exc)
        return 3
    except EOFError:
        logger.error("Input closed before a choice was made")
        return 3
    except PreconditionViolation:
        logger.critical("Encounter aborted on a broken precondition")
        raise
    return_active(players, active, args.active)

    for player in players:
        context.presenter.show_inventory(f"{player.name} ({player.kind.name.lower()})", player.inventory)

    if args.output is not None:
        save_scenario(players, args.output)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = Settings.load(user_path=args.settings_path)
    if args.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    configure_logging(level=level)

    if args.command == "encounter":
        return run_encounter(args, settings)
    return 1
