"""Command line helpers for inspecting client environment detection."""

import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from client_env.adapters.config import AppConfig
from client_env.adapters.host import HeadlessHostEnvironment, StaticHostEnvironment
from client_env.application import build_bootstrap_flags, classify, describe_client
from client_env.domain.contracts import HostEnvironment
from client_env.domain.models import BrowserType, NavigatorInfo

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _host_from_args(args: Any) -> HostEnvironment:
    """Build a host environment from parsed navigator options."""
    if getattr(args, "headless", False):
        return HeadlessHostEnvironment()
    navigator = NavigatorInfo(
        platform=args.platform,
        product=args.product,
        vendor=args.vendor,
        user_agent=args.user_agent,
        language=args.language,
    )
    return StaticHostEnvironment(navigator)


def format_browser_type(browser: BrowserType) -> str:
    """Format a browser type for terminal output."""
    if not browser.family and not browser.version:
        return "Unknown browser"
    return f"Family:  {browser.family}\nVersion: {browser.version}"


def _add_navigator_arguments(parser: Any) -> None:
    parser.add_argument("--user-agent", default=None, help="navigator.userAgent")
    parser.add_argument("--platform", default=None, help="navigator.platform")
    parser.add_argument("--product", default=None, help="navigator.product")
    parser.add_argument("--vendor", default=None, help="navigator.vendor")
    parser.add_argument("--language", default=None, help="navigator.language")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Simulate a host without a navigator",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Client environment detection helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a user agent
  client-env classify "Mozilla/5.0 (X11; Linux x86_64) Chrome/114.0.0.0 Safari/537.36"

  # Describe a client
  client-env describe --user-agent "Opera/9.80" --language en-US --vendor "Acme"

  # Print the full bootstrap flags (identifiers read from the environment)
  APP_ID=my-app client-env flags --user-agent "SomeBot/3.2"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    classify_parser = subparsers.add_parser("classify", help="Classify a user agent string")
    classify_parser.add_argument("user_agent", help="User agent string")
    classify_parser.add_argument("--json", action="store_true", help="Output as JSON")

    describe_parser = subparsers.add_parser("describe", help="Print the client descriptor")
    _add_navigator_arguments(describe_parser)

    flags_parser = subparsers.add_parser("flags", help="Print the bootstrap flags")
    _add_navigator_arguments(flags_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    _configure_logging(config.log_level)

    if args.command == "classify":
        browser = classify(args.user_agent)
        if args.json:
            print(json.dumps({"family": browser.family, "version": browser.version}, indent=2))
        else:
            print(format_browser_type(browser))

    elif args.command == "describe":
        payload = describe_client(_host_from_args(args))
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    elif args.command == "flags":
        try:
            flags = build_bootstrap_flags(config, _host_from_args(args))
        except ValueError as e:
            logger.error(f"Could not build bootstrap flags: {e}")
            sys.exit(1)
        print(json.dumps(flags.to_payload(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
