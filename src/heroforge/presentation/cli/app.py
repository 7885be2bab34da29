"""Console commands for rolling heroes from the definition tables."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence, Tuple

from heroforge.core.types import ROLES
from heroforge.data.errors import DataError
from heroforge.services import PartyService, hero_to_payload
from heroforge.services.errors import PartyCompositionError
from heroforge.services.factories import HeroFactory, build_hero_factory


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _parse_selection(value: str) -> Tuple[str, str]:
    class_id, sep, spec_id = value.partition(":")
    if not sep or not class_id or not spec_id:
        raise argparse.ArgumentTypeError(f"expected CLASS:SPEC, got '{value}'")
    return class_id, spec_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="heroforge", description="Create heroes from definition tables.")
    parser.add_argument("--definitions", default=None, help="Directory holding the JSON tables.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for names and bloodlines.")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--debug", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    roll = commands.add_parser("roll", help="Create one hero and print it as JSON.")
    roll.add_argument("--class", dest="class_id", required=True)
    roll.add_argument("--spec", dest="spec_id", required=True)
    roll.add_argument("--level", type=int, default=1)
    roll.add_argument("--bloodline", default=None)

    party = commands.add_parser("party", help="Create the five-hero starting party.")
    party.add_argument("--tank", type=_parse_selection, required=True, metavar="CLASS:SPEC")
    party.add_argument("--healer", type=_parse_selection, required=True, metavar="CLASS:SPEC")
    party.add_argument(
        "--dps", type=_parse_selection, action="append", required=True, metavar="CLASS:SPEC",
        help="Repeat three times.",
    )
    party.add_argument("--level", type=int, default=1)

    roles = commands.add_parser("roles", help="List classes able to fill a role.")
    roles.add_argument("role", choices=ROLES)
    return parser


def _roll(factory: HeroFactory, args: argparse.Namespace) -> int:
    hero = factory.create_hero(args.class_id, args.spec_id, args.level, args.bloodline)
    if hero is None:
        record = factory.reporter.records[-1]
        print(f"error: {record.message}", file=sys.stderr)
        return 1
    print(json.dumps(hero_to_payload(hero), indent=2))
    return 0


def _party(factory: HeroFactory, args: argparse.Namespace) -> int:
    if len(args.dps) != 3:
        print(f"error: expected 3 --dps selections, got {len(args.dps)}", file=sys.stderr)
        return 1
    selections = {"tank": args.tank, "healer": args.healer}
    selections.update({f"dps{index}": value for index, value in enumerate(args.dps, start=1)})
    try:
        party = PartyService(factory=factory).create_party(selections, level=args.level)
    except PartyCompositionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps([hero_to_payload(hero) for hero in party.heroes], indent=2))
    return 0


def _roles(factory: HeroFactory, args: argparse.Namespace) -> int:
    for class_id in factory.classes_for_role(args.role):
        print(class_id)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.debug)
    try:
        factory = build_hero_factory(args.definitions, seed=args.seed)
    except DataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    handlers = {"roll": _roll, "party": _party, "roles": _roles}
    return handlers[args.command](factory, args)


__all__ = ["build_parser", "main"]
