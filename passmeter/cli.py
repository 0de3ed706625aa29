"""CLI for PassMeter: score a password, watch live input, show or save the policy."""

import argparse
import json
import logging
import sys

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import config_path, load_config, save_config
from .evaluator import evaluate
from .exceptions import PolicyError
from .meter import StrengthMeter, bar_width, level_color
from .policy import Policy
from .suggestions import checklist, explain

BAR_CELLS = 28


def _policy_from_args(args) -> Policy:
    # stored settings first, then flags on top
    policy = Policy.from_mapping(load_config(args.config))
    return policy.replace(
        min_length=args.min_length,
        require_uppercase=False if args.no_upper else None,
        require_lowercase=False if args.no_lower else None,
        require_numbers=False if args.no_digits else None,
        require_special_chars=False if args.no_symbols else None,
        prevent_repeated_chars=False if args.allow_repeats else None,
        prevent_common_patterns=False if args.allow_common else None,
    )


def _bar(result) -> str:
    filled = round(result.fraction * BAR_CELLS)
    color = level_color(result.level)
    return f"[{color}]{'█' * filled}[/][grey50]{'░' * (BAR_CELLS - filled)}[/grey50] {bar_width(result)}"


def render_result(result, policy: Policy, password: str = "") -> None:
    color = level_color(result.level)
    header = f"[{color}]Strength: {result.level}[/] | {result.score} / {result.max_score}"
    print(Panel(_bar(result), title=header))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("", width=2)
    table.add_column("Criterion")
    for label, met in checklist(result, policy):
        mark = "[green]✓[/green]" if met else "[red]✗[/red]"
        table.add_row(mark, label)
    print(table)

    detections = explain(password, policy)
    if detections["repeated"] or detections["common"]:
        print("[bold]Detections:[/bold]")
        if detections["repeated"]:
            print(f" • Repeated run(s): {escape(', '.join(detections['repeated']))}")
        if detections["common"]:
            print(f" • Common pattern(s): {escape(', '.join(detections['common']))}")

    if result.feedback:
        print("\n[bold]Suggestions:[/bold]")
        for tip in result.feedback:
            print(f" - {tip}")


def cmd_score(args) -> int:
    policy = _policy_from_args(args)
    result = evaluate(args.password, policy)
    if args.json:
        sys.stdout.write(json.dumps(result.to_dict(), ensure_ascii=False) + "\n")
        return 0
    render_result(result, policy, args.password)
    return 0


def cmd_watch(args) -> int:
    """Read passwords line by line from stdin and re-render on every change."""
    policy = _policy_from_args(args)
    current = {"password": ""}

    def on_change(result):
        if args.json:
            sys.stdout.write(json.dumps(result.to_dict(), ensure_ascii=False) + "\n")
        else:
            render_result(result, policy, current["password"])

    meter = StrengthMeter(policy, on_change=on_change)
    for line in sys.stdin:
        current["password"] = line.rstrip("\r\n")
        meter.set_password(current["password"])
    return 0


def cmd_policy(args) -> int:
    policy = _policy_from_args(args)
    if args.save:
        path = save_config(policy.to_dict(), args.config)
        print(f"[green]Saved policy to:[/green] {path}")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in policy.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, escape(str(value)))
    print(table)
    print(f"[dim]Config file: {args.config or config_path()}[/dim]")
    return 0


def _add_policy_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", "-c", type=str, help="Path to settings file")
    p.add_argument("--min-length", type=int, default=None, help="Minimum password length")
    p.add_argument("--no-upper", action="store_true", help="Don't require uppercase letters")
    p.add_argument("--no-lower", action="store_true", help="Don't require lowercase letters")
    p.add_argument("--no-digits", action="store_true", help="Don't require digits")
    p.add_argument("--no-symbols", action="store_true", help="Don't require special characters")
    p.add_argument("--allow-repeats", action="store_true", help="Allow runs of repeated characters")
    p.add_argument("--allow-common", action="store_true", help="Allow common patterns (e.g. 'qwerty')")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passmeter")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password and show the checklist")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_policy_flags(sc)
    sc.set_defaults(func=cmd_score)

    w = sub.add_parser("watch", help="Evaluate each line read from stdin")
    w.add_argument("--json", action="store_true", help="Print each result as JSON")
    _add_policy_flags(w)
    w.set_defaults(func=cmd_watch)

    pol = sub.add_parser("policy", help="Show the effective policy")
    pol.add_argument("--save", action="store_true", help="Store the effective policy in the settings file")
    _add_policy_flags(pol)
    pol.set_defaults(func=cmd_policy)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except PolicyError as e:
        print(f"[red]Invalid policy: {e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
