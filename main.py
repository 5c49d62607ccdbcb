#!/usr/bin/env python3
import argparse
import json
import logging
import sys
from dataclasses import replace

import config
from discourse import ClientConfig, DiscourseClient, DiscourseError


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def resolve_badge_id(client: DiscourseClient, badge: str):
    """Accept either a numeric badge id or a badge name.

    Returns a (badge_id, problem) pair; badge_id is None when it could not be resolved.
    """
    if badge.isdecimal():
        return int(badge), None
    found = client.get_badge(badge)
    if found is None:
        return None, f"No badge named {badge!r}"
    badge_id = found.get("id")
    if badge_id is None:
        return None, f"Badge {badge!r} has no id"
    return badge_id, None


def describe_error(error: DiscourseError) -> str:
    status = getattr(error, "status_code", None)
    prefix = f"Error when {error.context}" if error.context else "Error"
    if status is not None:
        prefix = f"{prefix} (HTTP {status})"
    return f"{prefix}: {error}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grant badges and send private messages on a Discourse forum"
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        help=f"Request timeout in seconds (default: ${config.ENV_TIMEOUT} or {config.REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every request",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("verify", help="Check connectivity and API credentials")

    user = commands.add_parser("user", help="Show a user record")
    user.add_argument("username")

    badge = commands.add_parser("badge", help="Look up a badge by name")
    badge.add_argument("name")

    grant = commands.add_parser("grant", help="Grant a badge to a user")
    grant.add_argument("username")
    grant.add_argument("badge", help="Badge id or badge name")
    grant.add_argument(
        "--notify",
        nargs=2,
        metavar=("TITLE", "MESSAGE"),
        help="Also send the user a private message",
    )

    message = commands.add_parser("message", help="Send a private message")
    message.add_argument("username")
    message.add_argument("title")
    message.add_argument("message")

    return parser


def run_command(client: DiscourseClient, args) -> int:
    if args.command == "verify":
        print(client.verify())
        return 0

    if args.command == "user":
        print_json(client.get_user(args.username))
        return 0

    if args.command == "badge":
        found = client.get_badge(args.name)
        if found is None:
            print(f"No badge named {args.name!r}", file=sys.stderr)
            return 1
        print_json(found)
        return 0

    if args.command == "grant":
        badge_id, problem = resolve_badge_id(client, args.badge)
        if badge_id is None:
            print(problem, file=sys.stderr)
            return 1
        print_json(client.grant_badge(args.username, badge_id))
        if args.notify:
            title, text = args.notify
            print_json(client.send_message(args.username, title, text))
        return 0

    if args.command == "message":
        print_json(client.send_message(args.username, args.title, args.message))
        return 0

    return 2


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT,
    )

    try:
        client_config = ClientConfig.from_env()
        if args.timeout is not None:
            client_config = replace(client_config, timeout=args.timeout)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    client = DiscourseClient(client_config)
    try:
        return run_command(client, args)
    except DiscourseError as e:
        print(describe_error(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
