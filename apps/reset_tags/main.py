import argparse
import asyncio
import sys
from typing import List, Optional

from config.config import load_config
from internal.archiver import ArchiverRegistry, close_dependencies, init_dependencies
from internal.batch import ErrEnumeration, format_summary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="reset-tags",
        description="Delete every tag from outfit images and their backups.",
    )
    parser.add_argument(
        "start_after",
        nargs="?",
        default=None,
        help="Resume after this key",
    )
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tag reset run.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    deps = None

    try:
        app_config = load_config()
        deps = init_dependencies(app_config)
        logger = deps.logger

        registry = ArchiverRegistry(deps)
        usecase = registry.tag_reset()
        runner = registry.reset_runner()

        logger.info(f"Starting tag reset (start_after={args.start_after})")
        try:
            summary = await runner.run(usecase.handle, start_after=args.start_after)
        except ErrEnumeration as exc:
            logger.error(str(exc))
            print(format_summary(exc.summary))
            print(f"Stopped early. Resume with: reset-tags {exc.cursor or ''}".rstrip())
            return 1

        print(format_summary(summary))
        return 0
    finally:
        if deps:
            await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    run()
