"""Scroll watcher - feeds adjustment changes into a LoadMoreTrigger."""

import logging
from typing import Callable, Optional

from pagination_helper.core.protocols import ScrollAdjustment
from pagination_helper.managers.load_more_trigger import LoadMoreTrigger

logger = logging.getLogger("PaginationHelper.ScrollWatcher")


class AdjustmentScrollWatcher:
    """Watches a Gtk.Adjustment-like object for infinite scrolling."""

    def __init__(
        self,
        adjustment: ScrollAdjustment,
        trigger: LoadMoreTrigger,
        request_more: Callable[[], None],
        is_loading_more: Callable[[], bool],
    ):
        """Initialize AdjustmentScrollWatcher.

        Args:
            adjustment: Vertical adjustment of the scrolled view
            trigger: Trigger deciding when to load
            request_more: Callback starting the next load
            is_loading_more: Callback reporting whether a load is in flight
        """
        self.adjustment = adjustment
        self.trigger = trigger
        self.request_more = request_more
        self.is_loading_more = is_loading_more
        self._handler_id: Optional[int] = adjustment.connect(
            "value-changed", self._on_value_changed
        )

    def _on_value_changed(self, adjustment, *args):
        # The last reachable value is upper minus the visible page.
        max_position = adjustment.get_upper() - adjustment.get_page_size()
        if self.trigger.on_position_changed(
            adjustment.get_value(), max_position, self.is_loading_more()
        ):
            logger.info("Scrolled near the end of the list, loading more...")
            self.request_more()

    def disconnect(self) -> None:
        if self._handler_id is not None:
            self.adjustment.disconnect(self._handler_id)
            self._handler_id = None
