# -*- coding: utf-8 -*-
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .check_result import CheckResult
from .check_status import CheckStatus
from .url_normalizer import is_http_url


@dataclass(eq=False)
class LinkTarget:
    """
    A stored link checked in place by the URL checker.

    Instances compare by identity: the checker always writes results back
    to the object it was given.
    """
    url: str
    title: str = ""
    is_directory: bool = False
    status: CheckStatus = CheckStatus.UNKNOWN
    status_message: str = ""
    last_checked: Optional[datetime] = None
    redirect_url: Optional[str] = None

    @property
    def is_web_url(self) -> bool:
        return is_http_url(self.url)

    @property
    def has_redirect(self) -> bool:
        return bool(self.redirect_url) and self.redirect_url.lower() != self.url.lower()

    def apply_result(self, result: CheckResult, checked_at: Optional[datetime] = None) -> None:
        """
        Write a check result onto the target.

        :param result: Result of the check.
        :param checked_at: Check time, defaults to now.
        """
        self.status = result.status
        self.status_message = result.message
        self.last_checked = checked_at or datetime.now()
        self.redirect_url = result.redirect_url if result.redirect_detected else None

    def reset_status(self) -> None:
        self.status = CheckStatus.UNKNOWN
        self.status_message = ""
        self.last_checked = None
        self.redirect_url = None
