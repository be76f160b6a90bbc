#!/usr/bin/env python3
"""Check DAO execute calldata against a selector allow-list."""

import argparse
import sys

from condition.allow_list import AllowList, admin_predicate
from condition.gate import BatchGate, Evaluation
from condition.notify import install_notifications
from condition.selectors import format_selector, selector_from_signature, to_selector
from condition.signatures import describe_selector
from utils.config import Config, ConditionConfig
from utils.logging import set_level

LOGGER_NAMES = ("condition.gate", "condition.decoder", "condition.allow_list", "utils.events")


def build_allow_list(config: ConditionConfig, extra_selectors: list[str] | None = None) -> AllowList:
    """Seed an allow-list from configuration plus any extra selectors."""
    allow_list = AllowList(
        admin_predicate(config.admins),
        initial_selectors=[*config.allowed_selectors, *(extra_selectors or [])],
    )
    install_notifications(config.enable_notifications)
    return allow_list


def format_wei(value: int) -> str:
    """Render a wei amount as an exact ETH decimal string."""
    whole, fraction = divmod(value, 10**18)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:018d}".rstrip("0")


def format_report(evaluation: Evaluation, resolve: bool = False) -> list[str]:
    """Render a decision and its actions as printable lines."""
    request = evaluation.request
    verdict = "PERMITTED" if evaluation.permitted else "DENIED"
    lines = [f"Decision: {verdict} ({evaluation.reason.value})"]
    if request is None:
        return lines

    lines.append(f"🆔 Proposal: 0x{request.proposal_id.hex()}")
    lines.append(f"📦 Actions: {len(request.actions)}")
    for index, action in enumerate(request.actions):
        marker = " ❌" if index == evaluation.action_index else ""
        lines.append(f"--- Action {index}{marker} ---")
        lines.append(f"🎯 Target: {action.target}")
        signature = describe_selector(action.selector, resolve=resolve)
        function = format_selector(action.selector)
        lines.append(f"📝 Function: `{function}` {signature}" if signature else f"📝 Function: `{function}`")
        if action.value > 0:
            lines.append(f"💰 Value: {format_wei(action.value)} ETH")
    return lines


def _parse_hex(parser: argparse.ArgumentParser, value: str) -> bytes:
    try:
        return bytes.fromhex(value.strip().removeprefix("0x"))
    except ValueError:
        parser.error(f"--data is not valid hex: {value[:20]}...")


def run_check(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    config = Config.get_condition_config()
    try:
        extra = [format_selector(to_selector(s)) for s in args.allow]
        allow_list = build_allow_list(config, extra)
    except ValueError as e:
        parser.error(str(e))

    data = _parse_hex(parser, args.data)
    evaluation = BatchGate(allow_list).evaluate(data)
    for line in format_report(evaluation, resolve=args.resolve or config.resolve_signatures):
        print(line)
    return 0 if evaluation.permitted else 1


def run_selector(args: argparse.Namespace) -> int:
    print(format_selector(selector_from_signature(args.signature)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check DAO execute calldata against a selector allow-list.")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Evaluate an execute call")
    check.add_argument("--data", required=True, help="Execute calldata as hex, 0x prefix optional")
    check.add_argument(
        "--allow",
        action="append",
        default=[],
        metavar="SELECTOR",
        help="Selector to allow in addition to ALLOWED_SELECTORS (repeatable)",
    )
    check.add_argument("--resolve", action="store_true", help="Look up unknown selectors on Sourcify")

    selector = subparsers.add_parser("selector", help="Print the selector of a function signature")
    selector.add_argument("signature", help='e.g. "transfer(address,uint256)"')

    args = parser.parse_args(argv)
    if args.log_level:
        set_level(args.log_level, *LOGGER_NAMES)

    if args.command == "check":
        return run_check(args, parser)
    return run_selector(args)


if __name__ == "__main__":
    sys.exit(main())
