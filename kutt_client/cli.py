"""
Command-line interface for the Kutt client.

Usage:
    kutt shorten <url> [--password P] [--custom-url SLUG] [--domain D] [--reuse]
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

import httpx
from pydantic import ValidationError

from .client import KuttClient
from .config import KuttSettings, load_config
from .exceptions import KuttApiError
from .common.logging_config import setup_logging


class KuttCLI:
    """Command-line interface for creating Kutt links."""

    def __init__(
        self,
        settings: KuttSettings,
        verbose: bool = False,
        transport: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize CLI."""
        self.settings = settings
        self.logger = setup_logging(
            level="DEBUG" if verbose else settings.log_level,
            log_file=settings.log_file,
            json_format=settings.log_json,
        )
        self.transport = transport
        self.client: Optional[KuttClient] = None

    def initialize(self) -> None:
        """Create the API client."""
        self.client = KuttClient.from_settings(
            self.settings,
            transport=self.transport,
            logger=self.logger,
        )

    async def cleanup(self) -> None:
        """Cleanup resources."""
        if self.client:
            await self.client.aclose()

    def report_error(self, message: str) -> int:
        print(json.dumps({
            "success": False,
            "error": message
        }, indent=2), file=sys.stderr)
        return 1

    async def shorten(
        self,
        url: str,
        password: Optional[str] = None,
        custom_url: Optional[str] = None,
        domain: Optional[str] = None,
        reuse: bool = False,
    ) -> int:
        """Shorten a URL."""
        try:
            link = await self.client.create_link(
                url,
                password=password,
                custom_slug=custom_url,
                reuse=reuse,
                domain=domain,
                timeout=self.settings.timeout,
            )
        except KuttApiError as e:
            return self.report_error(e.message)
        except ValidationError as e:
            return self.report_error(f"Malformed response: {e}")
        except httpx.HTTPError as e:
            return self.report_error(f"Request failed: {e}")

        result = {"success": True}
        result.update(link.model_dump(mode="json"))
        print(json.dumps(result, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kutt",
        description="Kutt URL shortener client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL (API key from KUTT_API_KEY)
  %(prog)s shorten https://example.com/long/url

  # Shorten with a custom slug on a self-hosted server
  %(prog)s --server https://kutt.example.com shorten https://example.com --custom-url mylink
        """
    )

    parser.add_argument(
        "--api-key",
        help="API key (default: from KUTT_API_KEY env)"
    )

    parser.add_argument(
        "--server",
        help="Kutt server address (default: from KUTT_SERVER env or https://kutt.it)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--password", help="Password protecting the link")
    shorten_parser.add_argument("--custom-url", help="Custom slug")
    shorten_parser.add_argument("--domain", help="Custom domain")
    shorten_parser.add_argument(
        "--reuse",
        action="store_true",
        help="Return the existing link for this URL if there is one"
    )

    return parser


async def main(
    argv: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncClient] = None,
) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {}
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.server:
        overrides["server"] = args.server

    try:
        settings = load_config(**overrides)
    except ValidationError as e:
        print(json.dumps({
            "success": False,
            "error": f"Invalid configuration: {e}"
        }, indent=2), file=sys.stderr)
        return 1

    cli = KuttCLI(settings, verbose=args.verbose, transport=transport)

    try:
        try:
            cli.initialize()
        except ValueError as e:
            return cli.report_error(str(e))

        if args.command == "shorten":
            return await cli.shorten(
                args.url,
                password=args.password,
                custom_url=args.custom_url,
                domain=args.domain,
                reuse=args.reuse,
            )

        parser.print_help()
        return 1

    finally:
        await cli.cleanup()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
