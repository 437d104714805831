#!/usr/bin/env python
import argparse
import asyncio
from typing import Sequence

from catalog.containers import create_container, init_container, resolve, set_container, shutdown_container
from config import configure_loguru

DEFAULT_QUERIES: tuple[dict[str, str | int], ...] = (
    {"query": "squat", "limit": 10},
    {"query": "bench press", "limit": 5},
    {"query": "curl", "muscle_group": "biceps", "limit": 5},
    {"query": "db row", "limit": 5},
)


async def _run(queries: Sequence[dict[str, str | int]]) -> None:
    container = create_container()
    set_container(container)
    await init_container(container)
    try:
        tools = await resolve(container.template_tools)
        for params in queries:
            print(f"=== search-exercises {params}")
            response = await tools.search_exercises(**params)
            for item in response["content"]:
                print(item["text"])
            if response.get("isError"):
                print("[error] request failed")
        print(f"=== cache stats: {container.exercise_cache().get_stats().model_dump_json()}")
    finally:
        await shutdown_container(container)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run search-exercises queries against the live exercise catalog.")
    parser.add_argument("query", nargs="*", help="Queries to run. Defaults to a built-in smoke set.")
    parser.add_argument("--muscle-group", dest="muscle_group", default=None, help="Filter by muscle group.")
    parser.add_argument("--type", dest="exercise_type", default=None, help="Filter by exercise type.")
    parser.add_argument("--limit", type=int, default=10, help="Maximum results per query.")
    args = parser.parse_args()

    configure_loguru()
    if args.query:
        queries = [
            {
                "query": query,
                "muscle_group": args.muscle_group,
                "exercise_type": args.exercise_type,
                "limit": args.limit,
            }
            for query in args.query
        ]
    else:
        queries = list(DEFAULT_QUERIES)
    asyncio.run(_run(queries))


if __name__ == "__main__":
    main()
