import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.release_rules import RulesReleaseAdapter
from src.app_shell.config import validate_ops_rules
from src.components.releases import (
    DescribeArtifactInput,
    ResolveReleaseInput,
    run_describe,
    run_resolve,
)
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_release_rules(rules_path: Path) -> RulesReleaseAdapter | None:
    if not rules_path.exists():
        logger.warning(f"Rules file {rules_path} not found, using defaults.")
        return None
    return RulesReleaseAdapter.from_rules(load_rules(rules_path))


def handle_resolve(args: argparse.Namespace) -> int:
    try:
        rules = get_release_rules(Path(args.rules))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    output = run_resolve(ResolveReleaseInput(path=args.path), rules=rules)
    response = output.response

    if args.json:
        print(json.dumps(response.to_event_response(), indent=2))
    elif output.success:
        print(f"{response.status_code} {output.target}")
    else:
        print(f"{response.status_code} {json.dumps(output.diagnostics)}")

    return 0 if output.success else 1


def handle_describe(args: argparse.Namespace) -> int:
    try:
        rules = get_release_rules(Path(args.rules))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    output = run_describe(
        DescribeArtifactInput(version=args.version, os=args.os, arch=args.arch),
        rules=rules,
    )
    print(f"Epoch: {output.epoch.value}")
    print(f"File: {output.filename}")
    print(f"URL: {output.url}")
    return 0


def handle_check_rules(args: argparse.Namespace) -> int:
    try:
        rules = load_rules(Path(args.rules))
        validate_ops_rules(rules)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(f"Rules OK: {rules.project.slug} (v{rules.project.rules_version})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Release Redirect CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a download path")
    resolve_parser.add_argument("path", help="Request path, e.g. /releases/3.1.0/linux/amd64")
    resolve_parser.add_argument(
        "--json", action="store_true", help="Print the full platform response"
    )

    # describe
    describe_parser = subparsers.add_parser("describe", help="Show the artifact for a version")
    describe_parser.add_argument("version")
    describe_parser.add_argument("os")
    describe_parser.add_argument("arch")

    # check-rules
    subparsers.add_parser("check-rules", help="Validate the rules file")

    args = parser.parse_args(argv)

    if args.command == "resolve":
        return handle_resolve(args)
    elif args.command == "describe":
        return handle_describe(args)
    elif args.command == "check-rules":
        return handle_check_rules(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
