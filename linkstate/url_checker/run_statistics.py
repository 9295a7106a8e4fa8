# -*- coding: utf-8 -*-
from dataclasses import dataclass, asdict
from typing import Dict

from .check_result import CheckResult
from .check_status import CheckStatus


@dataclass
class RunStatistics:
    total_urls: int = 0
    accessible_count: int = 0
    error_count: int = 0
    not_found_count: int = 0
    redirect_count: int = 0
    cancelled: bool = False

    @property
    def checked_count(self) -> int:
        return self.accessible_count + self.error_count + self.not_found_count

    def to_dict(self) -> Dict[str, object]:
        return {**asdict(self), "checked_count": self.checked_count}


class ResultAggregator:
    """
    Tallies per-target results into the statistics of one batch run.

    :param total_urls: Number of targets handed to the batch.
    """

    def __init__(self, total_urls: int):
        self.statistics = RunStatistics(total_urls=total_urls)

    def add(self, result: CheckResult) -> None:
        """
        Count a result. Unknown results are not counted as checked.

        :param result: Result of one target check.
        """
        if result.status is CheckStatus.ACCESSIBLE:
            self.statistics.accessible_count += 1
        elif result.status is CheckStatus.NOT_FOUND:
            self.statistics.not_found_count += 1
        elif result.status is CheckStatus.ERROR:
            self.statistics.error_count += 1

        if result.redirect_detected:
            self.statistics.redirect_count += 1

    def mark_cancelled(self) -> None:
        self.statistics.cancelled = True
