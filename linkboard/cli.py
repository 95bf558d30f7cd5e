import argparse
import asyncio
import logging
import sys
from pathlib import Path

from linkboard.adapters.pages import StaticPageProvider
from linkboard.adapters.sqlite_store import SQLiteLinkStore
from linkboard.engine import SyncEngine
from linkboard.rules.loader import load_rules
from linkboard.rules.models import Rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    if not Path(path).exists():
        logger.warning(f"Rules file {path} not found, using defaults.")
        return Rules()
    return load_rules(Path(path))


def get_engine(args: argparse.Namespace) -> SyncEngine:
    rules = get_rules(args.rules)
    store = SQLiteLinkStore(args.db or rules.store.db_path)
    pages = StaticPageProvider(args.page or rules.store.default_page_id)
    return SyncEngine.create(store, pages, rules)


async def handle_list(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    if not await engine.start():
        return 1
    for position, link in enumerate(engine.snapshot.sorted(), start=1):
        print(f"{position}. {link.name} <{link.url}>  [{link.id}]")
    return 0


async def handle_add(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    await engine.start()
    outcome = await engine.actions.add(args.name, args.url)
    print(outcome.message or outcome.kind)
    return 0 if outcome.ok else 1


async def handle_move(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    await engine.start()
    outcome = await engine.actions.move(args.link_id, args.direction)
    print(outcome.message or outcome.kind)
    return 0 if outcome.kind in ("ok", "boundary") else 1


async def handle_delete(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    await engine.start()
    outcome = await engine.actions.delete(args.link_id)
    print(outcome.message or outcome.kind)
    return 0 if outcome.ok else 1


def handle_check_rules(args: argparse.Namespace) -> int:
    try:
        rules = load_rules(Path(args.rules))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    print(rules.model_dump_json(indent=2))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Linkboard CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    parser.add_argument("--db", help="SQLite database path (overrides rules)")
    parser.add_argument("--page", help="Active page id (overrides rules)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the active page's links")

    add_parser = subparsers.add_parser("add", help="Add a link to the active page")
    add_parser.add_argument("name")
    add_parser.add_argument("url")

    move_parser = subparsers.add_parser("move", help="Move a link one place")
    move_parser.add_argument("link_id")
    move_parser.add_argument("direction", choices=["up", "down"])

    delete_parser = subparsers.add_parser("delete", help="Delete a link")
    delete_parser.add_argument("link_id")

    subparsers.add_parser("check-rules", help="Validate the rules file")

    args = parser.parse_args()

    if args.command == "check-rules":
        sys.exit(handle_check_rules(args))

    handlers = {
        "list": handle_list,
        "add": handle_add,
        "move": handle_move,
        "delete": handle_delete,
    }
    sys.exit(asyncio.run(handlers[args.command](args)))


if __name__ == "__main__":
    main()
