#!/usr/bin/env python3
"""
Pagination example - pages through an in-memory product catalog
Scrolls to the end of the list until every product is loaded.

    python -m pagination_helper.example --mode cursor --config settings.yml
"""

import argparse
import asyncio
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from pagination_helper.config.settings import SettingsManager
from pagination_helper.core.requests import AddressingMode
from pagination_helper.managers.paginated_list_manager import PaginatedListManager

logger = logging.getLogger("PaginationHelper.Example")

TOTAL_PRODUCTS = 50
ROW_HEIGHT = 72.0
VIEWPORT_HEIGHT = 600.0


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: float


@dataclass(frozen=True)
class ProductData:
    products: List[Product] = field(default_factory=list)
    total: int = 0
    next_cursor: Optional[str] = None
    has_more: bool = True


def _make_products(start: int, limit: int) -> List[Product]:
    end = min(start + limit, TOTAL_PRODUCTS)
    return [
        Product(
            id=i + 1,
            name=f"Product {i + 1}",
            description=f"Description for product {i + 1}",
            price=round((i + 1) * 9.99, 2),
        )
        for i in range(start, end)
    ]


async def fetch_by_offset(offset: int, limit: int) -> ProductData:
    await asyncio.sleep(0.05)
    return ProductData(products=_make_products(offset, limit), total=TOTAL_PRODUCTS)


async def fetch_by_page(page: int, limit: int) -> ProductData:
    return await fetch_by_offset((page - 1) * limit, limit)


async def fetch_by_cursor(cursor: Optional[str], limit: int) -> ProductData:
    await asyncio.sleep(0.05)
    start = int(cursor) if cursor else 0
    products = _make_products(start, limit)
    end = start + len(products)
    has_more = end < TOTAL_PRODUCTS
    return ProductData(
        products=products,
        total=TOTAL_PRODUCTS,
        next_cursor=str(end) if has_more else None,
        has_more=has_more,
    )


def merge_products(current: ProductData, new: ProductData) -> ProductData:
    return replace(
        new,
        products=[*current.products, *new.products],
    )


def build_manager(mode: AddressingMode, settings_manager: SettingsManager):
    fetchers = {
        AddressingMode.OFFSET: fetch_by_offset,
        AddressingMode.PAGE: fetch_by_page,
        AddressingMode.CURSOR: fetch_by_cursor,
    }
    manager = PaginatedListManager(
        fetch=fetchers[mode],
        merge=merge_products,
        empty_data=ProductData,
        items_of=lambda d: d.products,
        mode=mode,
        total_count=lambda d: d.total,
        next_cursor=lambda d: d.next_cursor,
        has_more=lambda d: d.has_more,
        settings=settings_manager.settings.pagination,
    )
    manager.on_changed = lambda: logger.info(
        "%s: %d items loaded, loading=%s",
        manager.status.status.value,
        len(manager.items),
        manager.is_loading_more,
    )
    return manager


async def scroll_to_end(manager: PaginatedListManager) -> None:
    """Keep scrolling to the bottom until the list stops growing."""
    await manager.refresh()
    threshold = manager.trigger.threshold
    while True:
        loaded = len(manager.items)
        max_position = max(loaded * ROW_HEIGHT - VIEWPORT_HEIGHT, 0.0)

        if max_position - threshold > 0:
            # Back to the top first so the trigger re-arms.
            manager.on_scroll(0.0, max_position)
        task = manager.on_scroll(max_position, max_position)
        if task is None:
            # Too short to ever leave the band, load explicitly.
            await manager.load_more()
        else:
            await task
        if len(manager.items) == loaded:
            break

    logger.info("Finished with %d of %d products", len(manager.items), TOTAL_PRODUCTS)


def main(argv=None):
    """Entry point"""
    parser = argparse.ArgumentParser(prog="pagination_helper.example")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in AddressingMode],
        default=AddressingMode.OFFSET.value,
        help="Addressing mode of the simulated source",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to settings.yml")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    manager = build_manager(AddressingMode(args.mode), SettingsManager(args.config))
    asyncio.run(scroll_to_end(manager))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
