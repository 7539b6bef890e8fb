import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncSession

from stuff_manager.domain.models.stuff import Stuff
from stuff_manager.infrastructure.adapters.repositories.sqlalchemy_stuff_repository import (
    SQLAlchemyStuffRepository,
)
from stuff_manager.infrastructure.logging.logger import Logger, setup_logging
from stuff_manager.infrastructure.persistence.database import create_schema, dispose_engine, get_engine

logger = Logger.get_logger("seed_stuff")


def build_items(count: int, name_prefix: str) -> list[Stuff]:
    return [
        Stuff(name=f"{name_prefix} {i}", description=f"Description for {name_prefix.lower()} {i}")
        for i in range(1, count + 1)
    ]


async def seed(count: int, name_prefix: str) -> int:
    engine = get_engine()
    await create_schema(engine)
    async with AsyncSession(engine, expire_on_commit=False) as session:
        repository = SQLAlchemyStuffRepository(session)
        created = await repository.add_many(build_items(count, name_prefix))
    logger.info(f"Inserted {len(created)} stuff items")
    return len(created)


async def run(count: int, name_prefix: str) -> int:
    try:
        return await seed(count, name_prefix)
    finally:
        await dispose_engine()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the stuff table and insert sample items")
    parser.add_argument("--count", type=int, default=12)
    parser.add_argument("--name_prefix", type=str, default="Stuff Item")
    args = parser.parse_args()

    setup_logging()
    if args.count < 0:
        print("--count must not be negative", file=sys.stderr)
        sys.exit(2)
    try:
        asyncio.run(run(args.count, args.name_prefix))
    except Exception as e:
        print(f"Failed to seed stuff items: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
