"""
Command-line interface for slugcast.

Usage:
    slugcast shorten <url> [--slug SLUG]
    slugcast get <slug>
    slugcast init-db
    slugcast health

Connection settings come from the same environment variables as the server
(STORAGE_BACKEND, DATABASE_URL, REDIS_URL, ...) and can be overridden with
--backend, --database-url and --redis-url.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import Config
from .database import create_store
from .service import SlugService
from .common.logging_config import setup_logging
from .errors import SlugcastError


class SlugcastCLI:
    """Command-line interface for slugcast."""

    def __init__(self, config: Config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.store = None
        self.service = None

    async def initialize(self, create_tables: bool = False):
        """Initialize store and service."""
        self.logger.info(f"Initializing {self.config.storage_backend} slug store...")

        config = self.config
        if create_tables:
            config = config.model_copy(update={"database_create_tables": True})

        self.store = create_store(config, logger=self.logger)
        await self.store.initialize()

        self.service = SlugService(
            store=self.store,
            logger=self.logger,
            enable_custom_slugs=config.enable_custom_slugs,
            timeout=config.store_timeout_seconds,
        )

        self.logger.info("Initialization complete")

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()
        elif self.store:
            # initialize() failed before the service took ownership of the store
            await self.store.close()

    async def shorten(self, url: str, slug: Optional[str] = None) -> int:
        """Register a URL."""
        try:
            resolution = await self.service.shorten(url, slug)
        except SlugcastError as e:
            _print_error(str(e))
            return 1

        print(json.dumps({
            "success": True,
            "url": url,
            "slug": resolution.slug,
            "existed": resolution.existed,
        }, indent=2))
        return 0

    async def get(self, slug: str) -> int:
        """Print the URL registered for a slug."""
        try:
            url = await self.service.get_original_url(slug)
        except SlugcastError as e:
            _print_error(str(e))
            return 1

        if url is None:
            _print_error(f"URL for slug {slug} not found")
            return 1

        print(json.dumps({"success": True, "slug": slug, "url": url}, indent=2))
        return 0

    async def init_db(self) -> int:
        """Report table creation, which initialize() has already performed."""
        print(json.dumps({
            "success": True,
            "backend": self.config.storage_backend,
            "message": "Storage initialized",
        }, indent=2))
        return 0

    async def health(self) -> int:
        """Check store health."""
        health_status = await self.service.health_check()
        print(json.dumps({"success": health_status["overall"], "health": health_status}, indent=2))
        return 0 if health_status["overall"] else 1


def _print_error(message: str) -> None:
    print(json.dumps({"success": False, "error": message}, indent=2), file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugcast",
        description="slugcast URL shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL (slug derived from the URL)
  %(prog)s shorten https://example.com/long/url

  # Shorten with a chosen slug
  %(prog)s shorten https://example.com/long/url --slug mylink

  # Look up a slug
  %(prog)s get mylink

  # Create the PostgreSQL table
  %(prog)s --backend postgres init-db
        """
    )

    parser.add_argument("--backend", help="Storage backend: memory, postgres or redis")
    parser.add_argument("--database-url", help="PostgreSQL connection URL")
    parser.add_argument("--redis-url", help="Redis connection URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--slug", default=None, help="Slug to register instead of a derived one")

    get_parser = subparsers.add_parser("get", help="Get the URL for a slug")
    get_parser.add_argument("slug", help="Slug to lookup")

    subparsers.add_parser("init-db", help="Create tables for the storage backend")
    subparsers.add_parser("health", help="Check store health")

    return parser


def _config_from_args(args: argparse.Namespace) -> Config:
    overrides = {}
    if args.backend:
        overrides["storage_backend"] = args.backend
    if args.database_url:
        overrides["database_url"] = args.database_url
    if args.redis_url:
        overrides["redis_url"] = args.redis_url
    return Config(**overrides)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = None

    try:
        cli = SlugcastCLI(_config_from_args(args), verbose=args.verbose)
        await cli.initialize(create_tables=args.command == "init-db")

        if args.command == "shorten":
            return await cli.shorten(args.url, args.slug)
        elif args.command == "get":
            return await cli.get(args.slug)
        elif args.command == "init-db":
            return await cli.init_db()
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    except (SlugcastError, ValidationError, ValueError) as e:
        _print_error(str(e))
        return 1
    finally:
        if cli:
            await cli.cleanup()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
