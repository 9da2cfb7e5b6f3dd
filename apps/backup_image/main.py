import argparse
import asyncio
import sys
from typing import List, Optional

from config.config import load_config
from internal.archiver import ArchiverRegistry, close_dependencies, init_dependencies
from internal.image_backup import ErrObjectNotFound, IImageBackupUseCase, keys_for_outfit
from pkg.logger.logger import Logger

# Per-key results
RESULT_DONE = "done"
RESULT_MISSING = "missing"
RESULT_FAILED = "failed"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="backup-image",
        description="Back up and compress the three preview images of one outfit.",
    )
    parser.add_argument("outfit_id", help="Outfit id, e.g. 1234")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Redo compression regardless of tags (finished backups are kept)",
    )
    args = parser.parse_args(argv)
    try:
        args.keys = keys_for_outfit(args.outfit_id)
    except ValueError as exc:
        parser.error(str(exc))
    return args


async def process_key(usecase: IImageBackupUseCase, key: str, logger: Logger) -> str:
    try:
        await usecase.process(key)
    except ErrObjectNotFound:
        logger.warning(f"Key {key} not found")
        return RESULT_MISSING
    except Exception as exc:
        logger.exception(f"Error backing up {key}: {exc}")
        return RESULT_FAILED
    return RESULT_DONE


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the single-outfit backup.

    Returns:
        Process exit code: 1 if any key failed, 0 otherwise
    """
    args = parse_args(argv)
    deps = None

    try:
        app_config = load_config()
        deps = init_dependencies(app_config)
        logger = deps.logger

        usecase = ArchiverRegistry(deps).image_backup(force=args.force)
        results = await asyncio.gather(
            *(process_key(usecase, key, logger) for key in args.keys)
        )

        for key, result in zip(args.keys, results):
            print(f"- {key}: {result}")
        return 1 if RESULT_FAILED in results else 0
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
