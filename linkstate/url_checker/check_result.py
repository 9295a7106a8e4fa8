# -*- coding: utf-8 -*-
from dataclasses import dataclass
from typing import Optional

from .check_status import CheckStatus


@dataclass(frozen=True)
class CheckResult:
    status: CheckStatus
    message: str
    redirect_detected: bool = False
    redirect_url: Optional[str] = None
    redirect_count: int = 0
