import argparse
import asyncio
import json
import logging
import sys

from jobfinder.config.settings import settings
from jobfinder.core.errors import JobFinderError
from jobfinder.core.models import ListingQuery
from jobfinder.core.runner import runner

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="JobStreet Indonesia job finder")
    commands = parser.add_subparsers(dest="command", required=True)

    scrape = commands.add_parser("scrape", help="Scrape one listing page")
    scrape.add_argument("--keyword")
    scrape.add_argument("--location")
    scrape.add_argument("--classification")
    scrape.add_argument("--tag")
    scrape.add_argument("--page", type=int, default=1)
    scrape.add_argument("--limit", type=int, default=30)
    scrape.add_argument("--out", help="Write JSON to this file instead of stdout")

    detail = commands.add_parser("detail", help="Scrape one job detail page")
    detail.add_argument("job_id")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


async def scrape(args: argparse.Namespace) -> dict:
    query = ListingQuery(
        keyword=args.keyword,
        location=args.location,
        classification=args.classification,
        tag=args.tag,
        page=max(args.page, 1),
    )
    run = await runner.search(query, args.limit)
    result = run.result
    if result.is_fallback:
        logger.warning(f"Live scrape yielded nothing, output is sample data: {result.error}")
    return {
        "url": result.url,
        "source": result.provenance.value,
        "hasNextPage": result.has_next_page,
        "jobs": [record.to_dict() for record in result.records],
    }


async def detail(args: argparse.Namespace) -> dict:
    job = await runner.job_detail(args.job_id)
    return job.to_dict()


def emit(payload: dict, out: str = None) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Wrote {out}")
    else:
        print(text)


def serve(args: argparse.Namespace) -> None:
    import uvicorn

    from jobfinder.api.app import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


def main(argv=None) -> int:
    """
    Main entry point.
    """
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve(args)
        return 0

    try:
        if args.command == "scrape":
            emit(asyncio.run(scrape(args)), args.out)
        else:
            emit(asyncio.run(detail(args)))
    except JobFinderError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
