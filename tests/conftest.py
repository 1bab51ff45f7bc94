"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

import pytest


@dataclass(frozen=True)
class Page:
    items: List[int] = field(default_factory=list)
    total: int = 0
    next_cursor: Optional[str] = None
    has_more: bool = True


class StateRecorder:
    """Records every call made to a state sink."""

    def __init__(self):
        self.calls = []

    def __call__(self, is_loading, data, error):
        self.calls.append((is_loading, data, error))


class FakeRemote:
    """Serves a collection of `total` integers and counts fetch calls."""

    def __init__(self, total: int):
        self.total = total
        self.calls = []
        self.fail_next = None

    def _check_failure(self):
        if self.fail_next is not None:
            error, self.fail_next = self.fail_next, None
            raise error

    async def by_offset(self, offset, limit):
        self.calls.append((offset, limit))
        self._check_failure()
        end = min(offset + limit, self.total)
        return Page(items=list(range(offset, end)), total=self.total)

    async def by_page(self, page, limit):
        self.calls.append((page, limit))
        self._check_failure()
        start = (page - 1) * limit
        end = min(start + limit, self.total)
        return Page(items=list(range(start, end)), total=self.total)


def merge_pages(current: Page, new: Page) -> Page:
    return replace(new, items=current.items + new.items)


@pytest.fixture
def recorder() -> StateRecorder:
    return StateRecorder()


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote(total=25)


@pytest.fixture
def merge():
    return merge_pages


@pytest.fixture
def empty_page() -> Page:
    return Page()


@pytest.fixture
def page_factory():
    return Page


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"
