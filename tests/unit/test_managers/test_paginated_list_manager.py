"""Tests for PaginatedListManager."""

import asyncio

import pytest


def _make_manager(remote, merge, page_factory, **kwargs):
    from pagination_helper.managers.paginated_list_manager import PaginatedListManager

    return PaginatedListManager(
        fetch=kwargs.pop("fetch", remote.by_offset),
        merge=merge,
        empty_data=page_factory,
        items_of=lambda d: d.items,
        total_count=lambda d: d.total,
        **kwargs,
    )


def test_manager_initial_state(remote, merge, page_factory):
    from pagination_helper.models.response_status import ResponseStatus

    manager = _make_manager(remote, merge, page_factory)

    assert manager.items == []
    assert manager.is_empty is True
    assert manager.is_loading_more is False
    assert manager.error is None
    assert manager.display_count == 0
    assert manager.status.status is ResponseStatus.INITIAL


def test_manager_requires_extractors_for_mode(remote, merge, page_factory):
    from pagination_helper.core.requests import AddressingMode
    from pagination_helper.managers.paginated_list_manager import PaginatedListManager

    with pytest.raises(ValueError):
        PaginatedListManager(
            fetch=remote.by_offset,
            merge=merge,
            empty_data=page_factory,
            items_of=lambda d: d.items,
        )

    with pytest.raises(ValueError):
        PaginatedListManager(
            fetch=remote.by_offset,
            merge=merge,
            empty_data=page_factory,
            items_of=lambda d: d.items,
            mode=AddressingMode.CURSOR,
            next_cursor=lambda d: d.next_cursor,
        )


def test_manager_loads_all_pages(remote, merge, page_factory):
    from pagination_helper.models.response_status import ResponseStatus

    changes = []
    manager = _make_manager(remote, merge, page_factory)
    manager.on_changed = lambda: changes.append(manager.is_loading_more)

    async def run():
        while await manager.load_more():
            pass

    asyncio.run(run())

    assert manager.items == list(range(25))
    assert remote.calls == [(0, 10), (10, 10), (20, 10)]
    assert changes == [True, False, True, False, True, False]
    assert manager.status.status is ResponseStatus.SUCCESS


def test_manager_page_mode(remote, merge, page_factory):
    from pagination_helper.core.requests import AddressingMode

    manager = _make_manager(
        remote, merge, page_factory, fetch=remote.by_page, mode=AddressingMode.PAGE
    )

    asyncio.run(manager.load_more())
    asyncio.run(manager.load_more())

    assert remote.calls == [(1, 10), (2, 10)]
    assert len(manager.items) == 20


def test_manager_cursor_mode(merge, page_factory):
    from pagination_helper.core.requests import AddressingMode
    from pagination_helper.managers.paginated_list_manager import PaginatedListManager

    async def fetch(cursor, limit):
        start = int(cursor or 0)
        end = min(start + limit, 12)
        more = end < 12
        return page_factory(
            items=list(range(start, end)),
            next_cursor=str(end) if more else None,
            has_more=more,
        )

    manager = PaginatedListManager(
        fetch=fetch,
        merge=merge,
        empty_data=page_factory,
        items_of=lambda d: d.items,
        mode=AddressingMode.CURSOR,
        next_cursor=lambda d: d.next_cursor,
        has_more=lambda d: d.has_more,
    )

    results = [asyncio.run(manager.load_more()) for _ in range(3)]

    assert results == [True, True, False]
    assert manager.items == list(range(12))


def test_manager_error_keeps_items_and_is_not_latched(remote, merge, page_factory):
    from pagination_helper.models.response_status import ResponseStatus

    errors = []
    manager = _make_manager(remote, merge, page_factory, on_error=errors.append)

    asyncio.run(manager.load_more())
    remote.fail_next = RuntimeError("server unavailable")
    asyncio.run(manager.load_more())

    assert manager.items == list(range(10))
    assert manager.error == "server unavailable"
    assert manager.is_loading_more is False
    assert manager.status.status is ResponseStatus.ERROR
    assert manager.status.data.items == list(range(10))
    assert len(errors) == 1

    asyncio.run(manager.load_more())

    assert manager.error is None
    assert manager.items == list(range(20))


def test_manager_display_count_includes_loading_row(page_factory, merge):
    from pagination_helper.config.settings import PaginationSettings
    from pagination_helper.managers.paginated_list_manager import PaginatedListManager

    async def run(manager, seen):
        async def fetch(offset, limit):
            seen.append((manager.display_count, manager.is_loading_row(0)))
            return page_factory(items=[1, 2], total=10)

        manager.fetch = fetch
        await manager.load_more()

    for show, expected in ((True, (1, True)), (False, (0, False))):
        manager = PaginatedListManager(
            fetch=None,
            merge=merge,
            empty_data=page_factory,
            items_of=lambda d: d.items,
            total_count=lambda d: d.total,
            settings=PaginationSettings(show_loading_indicator=show),
        )
        seen = []
        asyncio.run(run(manager, seen))

        assert seen == [expected]
        assert manager.display_count == 2
        assert manager.is_loading_row(1) is False


def test_manager_on_scroll_schedules_single_load(remote, merge, page_factory):
    from pagination_helper.config.settings import PaginationSettings

    manager = _make_manager(
        remote, merge, page_factory,
        settings=PaginationSettings(load_more_threshold=200),
    )

    async def run():
        assert manager.on_scroll(100, 1000) is None
        task = manager.on_scroll(900, 1000)
        assert task is not None
        assert manager.on_scroll(950, 1000) is None
        await task

        assert manager.on_scroll(100, 1000) is None
        second = manager.on_scroll(900, 1000)
        await second

    asyncio.run(run())

    assert remote.calls == [(0, 10), (10, 10)]


def test_manager_refresh_reloads_first_page(remote, merge, page_factory):
    manager = _make_manager(remote, merge, page_factory)

    asyncio.run(manager.load_more())
    asyncio.run(manager.load_more())
    manager.trigger.on_position_changed(1000, 1000)

    asyncio.run(manager.refresh())

    assert remote.calls[-1] == (0, 10)
    assert manager.items == list(range(10))
    assert manager.trigger.armed is True


def test_manager_refresh_drops_stale_completion(merge, page_factory):
    from pagination_helper.managers.paginated_list_manager import PaginatedListManager

    release = {}

    async def fetch(offset, limit):
        if "slow" not in release:
            release["slow"] = asyncio.Event()
            await release["slow"].wait()
            return page_factory(items=["stale"], total=1)
        return page_factory(items=["fresh"], total=1)

    manager = PaginatedListManager(
        fetch=fetch,
        merge=merge,
        empty_data=page_factory,
        items_of=lambda d: d.items,
        total_count=lambda d: d.total,
    )

    async def run():
        slow = asyncio.ensure_future(manager.load_more())
        await asyncio.sleep(0)
        await manager.refresh()
        release["slow"].set()
        await slow

    asyncio.run(run())

    assert manager.items == ["fresh"]
    assert manager.is_loading_more is False


def test_manager_stops_after_loading_empty_collection(remote, merge, page_factory):
    from pagination_helper.models.response_status import ResponseStatus

    remote.total = 0
    manager = _make_manager(remote, merge, page_factory)

    results = [asyncio.run(manager.load_more()) for _ in range(4)]

    assert results == [True, False, False, False]
    assert remote.calls == [(0, 10)]
    assert manager.has_loaded is True
    assert manager.is_empty is True
    assert manager.status.status is ResponseStatus.SUCCESS


def test_manager_refresh_reloads_empty_collection(remote, merge, page_factory):
    remote.total = 0
    manager = _make_manager(remote, merge, page_factory)

    asyncio.run(manager.load_more())
    asyncio.run(manager.refresh())

    assert remote.calls == [(0, 10), (0, 10)]


def test_manager_holds_scheduled_task_until_done(remote, merge, page_factory):
    manager = _make_manager(remote, merge, page_factory)

    async def run():
        manager.on_scroll(1000, 1000)
        assert len(manager._tasks) == 1
        await asyncio.gather(*list(manager._tasks))
        await asyncio.sleep(0)

    asyncio.run(run())

    assert manager._tasks == set()
    assert manager.items == list(range(10))


def test_manager_logs_failed_scheduled_task(remote, merge, page_factory, caplog):
    def broken_render():
        raise RuntimeError("render failed")

    manager = _make_manager(remote, merge, page_factory, on_changed=broken_render)

    async def run():
        manager.on_scroll(1000, 1000)
        await asyncio.gather(*list(manager._tasks), return_exceptions=True)
        await asyncio.sleep(0)

    asyncio.run(run())

    assert manager._tasks == set()
    assert "Scheduled load failed: render failed" in caplog.text
