"""
Entry point: `python -m backend [serve|seed]`.

serve: seed the exercise catalog, then run uvicorn on the same event loop.
seed:  seed the exercise catalog and exit (non-zero on failure).
"""
import argparse
import asyncio
import logging
import sys

import uvicorn

from backend.main import SeedingFailed, bootstrap, build_document_store, seed_exercise_catalog
from backend.settings import get_settings

logger = logging.getLogger("backend")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def serve(host: str, port: int) -> None:
    app = await bootstrap()
    config = uvicorn.Config(app, host=host, port=port, log_level=get_settings().log_level.lower())
    await uvicorn.Server(config).serve()


async def seed() -> None:
    store = build_document_store(get_settings())
    if store is None:
        raise SeedingFailed("Cannot seed exercise catalog: no document store configured")
    await seed_exercise_catalog(store)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="python -m backend", description="LiftLog API")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Seed, then serve the HTTP API (default)")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)

    subparsers.add_parser("seed", help="Seed the exercise catalog and exit")

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        if args.command == "seed":
            asyncio.run(seed())
        else:
            asyncio.run(serve(getattr(args, "host", "0.0.0.0"), getattr(args, "port", 8080)))
    except SeedingFailed as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
