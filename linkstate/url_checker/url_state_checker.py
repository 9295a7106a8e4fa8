# -*- coding: utf-8 -*-
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Optional, Tuple, Union
import asyncio
import logging

from ..console import print
from .check_result import CheckResult
from .check_session import CheckSession
from .check_status import CheckStatus
from .config import CheckerConfig
from .exceptions import CheckCancelledError, TargetDetachedError
from .link_target import LinkTarget
from .redirect_resolver import RedirectResolver
from .run_statistics import ResultAggregator, RunStatistics
from .target_collector import CollectedTarget, collect_targets
from .transport import AiohttpTransport, Transport

ProgressCallback = Callable[[int, int, str, Optional[Any]], None]


class URLStateChecker:
    """
    Checks accessibility of stored links one after another.

    Only one batch may run at a time per checker; starting another one raises
    CheckInProgressError. Results are written onto the LinkTarget instances.
    """

    def __init__(self, config: Optional[CheckerConfig] = None, transport: Optional[Transport] = None):
        """
        Initialize the checker.

        :param config: Checker configuration, defaults are used when omitted.
        :param transport: HTTP transport; an AiohttpTransport is opened per batch when omitted.
        """
        self.config = config or CheckerConfig()
        self.transport = transport
        self._session = CheckSession()
        self.logger = logging.getLogger(__name__)

    @property
    def is_checking(self) -> bool:
        return self._session.in_progress

    def cancel_check(self) -> bool:
        """
        Request cancellation of the running batch.

        :return: True if a running batch was signalled.
        """
        cancelled = self._session.cancel()
        if cancelled:
            self.logger.info("URL check cancellation requested")
        return cancelled

    def run(self, root: Any, progress_callback: Optional[ProgressCallback] = None, stdout: bool = True) -> RunStatistics:
        """
        Check every web link below the root node and optionally print a summary.

        :param root: Root node of the link tree.
        :param progress_callback: Optional callback (current, total, url, node).
        :param stdout: Whether to print the summary to console.
        :return: RunStatistics of the batch.
        """
        try:
            statistics = asyncio.run(self.check_category(root, progress_callback=progress_callback))
        except Exception as e:
            self.logger.error(f"Error during URL checking: {e}")
            raise

        if stdout:
            self._print_summary(statistics)
        return statistics

    async def check_category(self, root: Any, progress_callback: Optional[ProgressCallback] = None) -> RunStatistics:
        """
        Collect the web links below a node and check them.

        :param root: Root node of the link tree.
        :param progress_callback: Optional callback (current, total, url, node).
        :return: RunStatistics of the batch.
        """
        targets = collect_targets(root)
        self.logger.info(f"Found {len(targets)} URL links to check")
        return await self.check_targets(targets, progress_callback=progress_callback)

    async def check_targets(
            self,
            targets: Iterable[Union[LinkTarget, CollectedTarget]],
            progress_callback: Optional[ProgressCallback] = None
    ) -> RunStatistics:
        """
        Check targets sequentially in the given order.

        The progress callback is invoked before each check. Cancellation is
        observed between targets and by the request in flight; the statistics
        then cover only the targets finished so far.

        :param targets: LinkTarget instances or (target, node) pairs.
        :param progress_callback: Optional callback (current, total, url, node).
        :return: RunStatistics of the batch.
        :raises CheckInProgressError: If another batch is running.
        :raises TargetDetachedError: If a node no longer holds its target.
        """
        signal = self._session.acquire()
        try:
            pairs = [t if isinstance(t, CollectedTarget) else CollectedTarget(t) for t in targets]
            aggregator = ResultAggregator(total_urls=len(pairs))

            async with self._get_transport() as transport:
                resolver = RedirectResolver(transport, max_redirects=self.config.max_redirects)

                for index, (target, node) in enumerate(pairs, start=1):
                    if signal.is_cancelled:
                        self.logger.info("Check cancelled by user")
                        aggregator.mark_cancelled()
                        break

                    self._validate_node(target, node)

                    if progress_callback is not None:
                        progress_callback(index, len(pairs), target.url, node)

                    try:
                        result = await resolver.resolve(target.url, signal)
                    except CheckCancelledError:
                        self.logger.info(f"Check cancelled by user while checking {target.url}")
                        aggregator.mark_cancelled()
                        break
                    except Exception as e:
                        self.logger.warning(f"Exception checking {target.url}: {e}")
                        result = CheckResult(CheckStatus.ERROR, f"Exception: {e}")

                    target.apply_result(result)
                    aggregator.add(result)
                    self.logger.debug(f"{index}/{len(pairs)}: {target.title or target.url} = {result.status.value}")

            statistics = aggregator.statistics
            self.logger.info(
                f"URL check finished: {statistics.checked_count} of {statistics.total_urls} checked, "
                f"{statistics.accessible_count} accessible, {statistics.not_found_count} not found, "
                f"{statistics.error_count} errors, {statistics.redirect_count} redirects"
            )
            return statistics
        finally:
            self._session.release()

    async def check_one(self, url: str) -> Tuple[CheckStatus, str]:
        """
        Check a single URL outside of a batch.

        :param url: URL to check.
        :return: Tuple of (status, message).
        """
        result = await self.check_url_with_redirect(url)
        return result.status, result.message

    async def check_url_with_redirect(self, url: str) -> CheckResult:
        """
        Check a single URL outside of a batch and keep the redirect details.

        :param url: URL to check.
        :return: CheckResult instance.
        """
        try:
            async with self._get_transport() as transport:
                return await RedirectResolver(transport, max_redirects=self.config.max_redirects).resolve(url)
        except Exception as e:
            self.logger.debug(f"Unexpected error for {url}: {e}")
            return CheckResult(CheckStatus.ERROR, f"Error: {e}")

    def needs_recheck(self, target: LinkTarget, now: Optional[datetime] = None) -> bool:
        if target.last_checked is None:
            return True
        age = (now or datetime.now()) - target.last_checked
        return age > timedelta(minutes=self.config.recheck_minutes)

    async def refresh_target(self, target: LinkTarget, force: bool = False) -> Optional[CheckResult]:
        """
        Recheck a link the user has just opened and store the result on it.

        :param target: Link target to check.
        :param force: Check even if the last check is recent.
        :return: CheckResult, or None if the last check was recent enough.
        """
        if not force and not self.needs_recheck(target):
            return None

        result = await self.check_url_with_redirect(target.url)
        target.apply_result(result)
        if result.redirect_detected:
            self.logger.info(f"Redirect detected: {target.url} -> {result.redirect_url}")
        return result

    def reset_statuses(self, root: Any) -> int:
        """
        Reset the check results of every web link below a node.

        :param root: Root node of the link tree.
        :return: Number of links reset.
        """
        targets = collect_targets(root)
        for target, _ in targets:
            target.reset_status()
        return len(targets)

    @asynccontextmanager
    async def _get_transport(self):
        """
        Async context manager yielding the injected transport or a fresh aiohttp one.

        :return: Transport instance.
        """
        if self.transport is not None:
            yield self.transport
            return

        async with AiohttpTransport(self.config) as transport:
            yield transport

    @staticmethod
    def _validate_node(target: LinkTarget, node: Optional[Any]) -> None:
        if node is not None and getattr(node, "content", None) is not target:
            raise TargetDetachedError(f"Tree node not found for link '{target.title or target.url}'. Check cancelled.")

    @staticmethod
    def _print_summary(statistics: RunStatistics) -> None:
        """
        Print a summary of total, accessible, not found, errors and redirects.

        :param statistics: RunStatistics of the batch.
        """
        print("\n[bold]Summary:[/bold]")
        print(f"Total URLs: {statistics.total_urls}")
        print(f"Checked: {statistics.checked_count}")
        print(f"[green]Accessible: {statistics.accessible_count}[/green]")
        print(f"[red]Not found: {statistics.not_found_count}[/red]")
        print(f"[yellow]Errors: {statistics.error_count}[/yellow]")
        print(f"[cyan]Redirects: {statistics.redirect_count}[/cyan]")
        if statistics.cancelled:
            print("[yellow]Check cancelled by user[/yellow]")
