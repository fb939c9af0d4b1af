"""
Mode Selector - Holds the face privacy filter currently selected by the user
"""

import logging
from typing import Union

from snaplab.common.enums import FilterMode

logger = logging.getLogger(__name__)


class ModeSelector:
    """
    Current face filter mode.

    Starts at GREYSCALE and only changes on an explicit selection; no
    history is kept. The pipeline never reads this object, callers pass
    `mode` to it on every call.
    """

    INITIAL_MODE = FilterMode.GREYSCALE

    def __init__(self, mode: FilterMode = INITIAL_MODE):
        self.mode = FilterMode(mode)

    def select(self, mode: Union[FilterMode, str]) -> bool:
        """
        Select a mode.

        Args:
            mode: FilterMode or its string value

        Returns:
            True if the mode changed

        Raises:
            ValueError: If mode is not a FilterMode value
        """
        new_mode = FilterMode(mode)
        changed = new_mode != self.mode
        if changed:
            logger.info(f"Face filter mode: {self.mode.value} -> {new_mode.value}")
        self.mode = new_mode
        return changed

    def select_key(self, key: str) -> bool:
        """
        Select a mode from a number key ("1".."4").

        Any other key is ignored.

        Returns:
            True if the mode changed
        """
        mode = FilterMode.from_key(key)
        if mode is None:
            return False
        return self.select(mode)

    def reset(self):
        self.mode = self.INITIAL_MODE
