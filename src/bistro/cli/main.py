from __future__ import annotations

import argparse
import sys
from typing import Sequence

from bistro.application.use_cases.list_orders import ListOrders
from bistro.cli.demo import run_demo
from bistro.domain.common.ids import OrderIdSequence
from bistro.domain.menu.entities import DEFAULT_CATALOG_CAPACITY
from bistro.infrastructure.memory.order_manager import OrderManager
from bistro.infrastructure.menu.default_menu import DEFAULT_MENU, build_catalog
from bistro.infrastructure.menu.json_menu import MenuFileError, load_menu_file
from bistro.infrastructure.observability.logging_config import configure_logging
from bistro.infrastructure.observability.otel import configure_otel


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bistro-demo",
        description="Run the restaurant order management demonstration.",
    )
    parser.add_argument(
        "--menu",
        default=None,
        help="JSON file of [{\"name\": ..., \"price\": ...}] replacing the built-in menu.",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CATALOG_CAPACITY,
        help=f"Maximum number of menu items (default {DEFAULT_CATALOG_CAPACITY}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the remaining orders as JSON after the demo.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level for the JSON log stream on stderr (overrides LOG_LEVEL).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)
    configure_otel()

    try:
        entries = load_menu_file(args.menu) if args.menu else list(DEFAULT_MENU)
        catalog = build_catalog(entries, capacity=args.capacity)
    except (MenuFileError, ValueError) as exc:
        print(f"menu error: {exc}", file=sys.stderr)
        return 2

    with OrderManager() as manager:
        run_demo(catalog, manager, OrderIdSequence(), out=sys.stdout)
        if args.json:
            print(ListOrders(order_repository=manager).execute().model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
