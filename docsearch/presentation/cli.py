import argparse
import asyncio
import logging
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from docsearch.config.settings import Settings, settings
from docsearch.container import configure_container, container
from docsearch.core.services.index_service import IndexService
from docsearch.core.services.session import SearchSession

logging.basicConfig(level=settings.log_level, format="%(message)s")
logger = logging.getLogger(__name__)

FILTER_PREFIX = ":filter "

# Holds .chainlit/config.toml, which enables HTML in messages.
CHAINLIT_APP_ROOT = PROJECT_ROOT


def cmd_search(args: argparse.Namespace) -> None:
    """Search command - run one query and print the fragment."""
    configure_container(settings)
    session = container.resolve(SearchSession)

    for category in args.filter:
        if category not in session.categories:
            logger.warning(f"Unknown category: {category}")
        if category not in session.filters:
            session.filters.toggle(category)

    session.query_text = args.query
    print(session.update().html)


def cmd_categories(args: argparse.Namespace) -> None:
    """Categories command - list document categories."""
    configure_container(settings)
    index_service = container.resolve(IndexService)
    for category in index_service.categories:
        print(category)


async def _repl(session: SearchSession) -> None:
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            break
        line = line.rstrip("\n")

        if line.startswith(FILTER_PREFIX):
            session.on_filter_click(line[len(FILTER_PREFIX):].strip())
        else:
            session.on_input(line)

        view = await session.wait()
        print(view.html)

    session.close()


def cmd_repl(args: argparse.Namespace) -> None:
    """Repl command - every input line is a keystroke event."""
    configure_container(settings)
    session = container.resolve(SearchSession)
    logger.info(f"Categories: {', '.join(session.categories)}")
    logger.info(f"Type a query, or '{FILTER_PREFIX}<category>' to toggle a filter")
    asyncio.run(_repl(session))


def cmd_startup(args: argparse.Namespace) -> None:
    """Startup command - index, run the chat UI."""
    logger.info("Starting docsearch...")

    configure_container(settings)
    index_service = container.resolve(IndexService)
    if not index_service.documents:
        logger.error(f"No documents loaded from {settings.search_index_path}")
        sys.exit(1)

    logger.info("Starting Chainlit...")
    subprocess.run(chainlit_command(settings), env=chainlit_env(settings))


def chainlit_command(settings: Settings) -> list[str]:
    return [
        sys.executable,
        "-m",
        "chainlit",
        "run",
        str(Path(__file__).parent / "chainlit_app.py"),
        "--host",
        settings.chainlit_host,
        "--port",
        str(settings.chainlit_port),
    ]


def chainlit_env(settings: Settings) -> dict[str, str]:
    """Environment for the chainlit process.

    The search index path is made absolute so the app finds it regardless
    of the chainlit working directory.
    """
    return {
        **os.environ,
        "CHAINLIT_APP_ROOT": str(CHAINLIT_APP_ROOT),
        "SEARCH_INDEX_PATH": str(Path(settings.search_index_path).resolve()),
    }


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="docsearch")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="run a single query")
    search.add_argument("query")
    search.add_argument("--filter", action="append", default=[])
    search.set_defaults(handler=cmd_search)

    categories = subparsers.add_parser("categories", help="list categories")
    categories.set_defaults(handler=cmd_categories)

    repl = subparsers.add_parser("repl", help="interactive search")
    repl.set_defaults(handler=cmd_repl)

    startup = subparsers.add_parser("startup", help="index and run the chat UI")
    startup.set_defaults(handler=cmd_startup)

    args = parser.parse_args()
    args.handler(args)


if __name__ == "__main__":
    main()
