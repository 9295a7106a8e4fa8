# -*- coding: utf-8 -*-
from enum import Enum


class CheckStatus(str, Enum):
    """Accessibility state of a link target."""
    UNKNOWN = "unknown"
    ACCESSIBLE = "accessible"
    ERROR = "error"
    NOT_FOUND = "not_found"

    @property
    def display_text(self) -> str:
        """
        Human readable status text shown next to a link.

        :return: Status text.
        """
        return {
            CheckStatus.ACCESSIBLE: "URL is accessible",
            CheckStatus.ERROR: "URL returned an error",
            CheckStatus.NOT_FOUND: "URL not found",
        }.get(self, "URL status not checked")
