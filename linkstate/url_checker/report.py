# -*- coding: utf-8 -*-
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pandas as pd

from ..report import Report
from .link_target import LinkTarget
from .target_collector import CollectedTarget


class LinkCheckReport(Report):
    """A CSV report of the link statuses after a check run.

    Each write replaces the previous report: only the current state is kept.

    :param path: Path to the CSV file
    :param delimiter: Delimiter to use in the CSV file
    """
    fieldnames = ['title', 'url', 'status', 'message', 'last_checked', 'redirect_url']

    def __init__(self, path: Union[str, Path], delimiter: str = '\t'):
        super().__init__()
        self.path = Path(path)
        self.delimiter = delimiter

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    @property
    def df(self) -> Optional[pd.DataFrame]:
        return self.read(self.path, delimiter=self.delimiter)

    def write(self, targets: Iterable[Union[LinkTarget, CollectedTarget]]) -> str:
        """Write the current status of the targets to the report file.

        :param targets: LinkTarget instances or (target, node) pairs
        :return: Path to the written report
        """
        rows = []
        for item in targets:
            target = item.target if isinstance(item, CollectedTarget) else item
            rows.append({
                'title': target.title,
                'url': target.url,
                'status': target.status.value,
                'message': target.status_message,
                'last_checked': target.last_checked.isoformat(timespec='seconds') if target.last_checked else '',
                'redirect_url': target.redirect_url or '',
            })
        return self.save_csv(pd.DataFrame(rows, columns=self.fieldnames), self.path, delimiter=self.delimiter)

    def summary(self) -> Dict[str, int]:
        """Count report rows per status.

        :return: Mapping of status value to number of links
        """
        df = self.df
        if df is None or df.empty:
            return {}
        return {str(status): int(count) for status, count in self.value_count(df, 'status').items()}

    def broken_links(self) -> Optional[pd.DataFrame]:
        """Get the rows of links that are not accessible.

        :return: DataFrame with error and not found rows, or None if there are none
        """
        df = self.df
        if df is None or df.empty:
            return None
        broken = df[df['status'].isin(['error', 'not_found'])]
        return None if broken.empty else broken
