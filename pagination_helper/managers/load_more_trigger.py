"""Load-more trigger - turns scroll positions into discrete load requests."""

import logging
from enum import Enum
from typing import Callable, Optional

from pagination_helper.core.protocols import ScrollPosition

logger = logging.getLogger("PaginationHelper.Trigger")

DEFAULT_THRESHOLD = 200.0


class TriggerState(Enum):
    ARMED = "armed"
    DISARMED = "disarmed"


class LoadMoreTrigger:
    """Fires once per approach to the end of a scrollable list.

    Entering the band ``[max_position - threshold, max_position]`` fires the
    trigger and disarms it. It stays disarmed while the position remains in
    the band and re-arms as soon as the position leaves it. Nothing fires
    while a load is in flight.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        on_load_more: Optional[Callable[[], None]] = None,
    ):
        """Initialize LoadMoreTrigger.

        Args:
            threshold: Distance from the end that counts as "near the end"
            on_load_more: Called every time the trigger fires
        """
        if threshold < 0:
            raise ValueError(f"threshold must not be negative, got {threshold}")
        self.threshold = threshold
        self.on_load_more = on_load_more
        self.state = TriggerState.ARMED

    @property
    def armed(self) -> bool:
        return self.state is TriggerState.ARMED

    def on_position_changed(
        self,
        position: float,
        max_position: float,
        is_loading_more: bool = False,
        threshold: Optional[float] = None,
    ) -> bool:
        """Handle a scroll position update.

        Args:
            position: Current scroll offset
            max_position: Largest reachable scroll offset
            is_loading_more: Whether the caller has a load in flight
            threshold: Overrides the configured threshold for this update

        Returns:
            True if a load should start now
        """
        if threshold is None:
            threshold = self.threshold

        if position < max_position - threshold:
            if self.state is TriggerState.DISARMED:
                logger.debug("Left the load-more band at %s, re-arming", position)
            self.state = TriggerState.ARMED
            return False

        if is_loading_more or self.state is TriggerState.DISARMED:
            return False

        self.state = TriggerState.DISARMED
        logger.debug(
            "Reached load-more band at %s of %s, firing", position, max_position
        )
        if self.on_load_more is not None:
            self.on_load_more()
        return True

    def check(self, scroll: ScrollPosition, is_loading_more: bool = False) -> bool:
        """Same as on_position_changed for objects with pixels/max_scroll_extent."""
        return self.on_position_changed(
            scroll.pixels, scroll.max_scroll_extent, is_loading_more
        )

    def reset(self) -> None:
        self.state = TriggerState.ARMED
