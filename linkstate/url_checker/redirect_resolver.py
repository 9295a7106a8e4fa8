# -*- coding: utf-8 -*-
from typing import Optional
from urllib.parse import urljoin
import asyncio
import logging

from .check_result import CheckResult
from .check_session import CancellationSignal
from .check_status import CheckStatus
from .exceptions import CheckCancelledError
from .transport import OutcomeKind, Transport, TransportOutcome
from .url_normalizer import is_http_url, normalize_url


class RedirectResolver:
    """
    Resolve one URL to a terminal accessibility status.

    Every hop is requested with HEAD (GET when the server answers 405) and
    redirects are followed here, hop by hop, so that loops can be detected
    on normalized URLs.

    :param transport: Object with ``async request(method, url) -> TransportOutcome``.
    :param max_redirects: Maximum number of redirects followed per URL.
    """

    def __init__(self, transport: Transport, max_redirects: int = 10):
        self.transport = transport
        self.max_redirects = max_redirects
        self.logger = logging.getLogger(__name__)

    async def resolve(self, url: str, signal: Optional[CancellationSignal] = None) -> CheckResult:
        """
        Check a URL and follow its redirect chain.

        :param url: URL to check.
        :param signal: Cancellation signal of the running batch.
        :return: CheckResult instance.
        :raises CheckCancelledError: If cancellation was requested during the check.
        """
        if not url or not url.strip():
            return CheckResult(CheckStatus.NOT_FOUND, "URL is empty")

        if not is_http_url(url):
            return CheckResult(CheckStatus.UNKNOWN, "Not an HTTP/HTTPS URL")

        current_url = url.strip()
        original_key = normalize_url(current_url)
        visited = {original_key}
        redirects = 0

        while True:
            outcome = await self._request_hop(current_url, signal)

            if outcome.kind is OutcomeKind.CANCELLED:
                raise CheckCancelledError(f"Check of {url} cancelled")

            if outcome.kind is OutcomeKind.TIMED_OUT:
                return CheckResult(CheckStatus.ERROR, "Request timed out")

            if outcome.kind is OutcomeKind.UNREACHABLE:
                return CheckResult(CheckStatus.NOT_FOUND, f"Connection failed: {outcome.error}")

            if outcome.kind is OutcomeKind.TRANSPORT_ERROR:
                return CheckResult(CheckStatus.ERROR, f"Error: {outcome.error}")

            if outcome.kind is not OutcomeKind.REDIRECT:
                break

            if not outcome.location:
                return CheckResult(CheckStatus.ERROR, f"{outcome.status_line}: redirect without Location header")

            next_url = urljoin(current_url, outcome.location.strip())
            next_key = normalize_url(next_url)
            if next_key in visited:
                return CheckResult(CheckStatus.ERROR, f"redirect loop detected after {redirects + 1} redirect(s)")

            if redirects >= self.max_redirects:
                return CheckResult(CheckStatus.ERROR, f"too many redirects (max {self.max_redirects})")

            self.logger.debug(f"{current_url} -> {next_url} ({outcome.status_code})")
            visited.add(next_key)
            current_url = next_url
            redirects += 1

        return self._terminal_result(outcome, original_key, current_url, redirects)

    async def _request_hop(self, url: str, signal: Optional[CancellationSignal]) -> TransportOutcome:
        """
        Request one hop with HEAD, retrying once with GET on 405.

        :param url: Current URL of the chain.
        :param signal: Cancellation signal of the running batch.
        :return: TransportOutcome of the hop.
        """
        outcome = await self._send("HEAD", url, signal)
        if outcome.kind is OutcomeKind.METHOD_NOT_ALLOWED:
            self.logger.debug(f"HEAD not allowed for {url}, retrying with GET")
            outcome = await self._send("GET", url, signal)
        return outcome

    async def _send(self, method: str, url: str, signal: Optional[CancellationSignal]) -> TransportOutcome:
        """
        Send a request that gives way to the cancellation signal.

        :param method: HTTP method.
        :param url: Request URL.
        :param signal: Cancellation signal of the running batch.
        :return: TransportOutcome, CANCELLED if the signal fired first.
        """
        if signal is None:
            return await self.transport.request(method, url)

        if signal.is_cancelled:
            return TransportOutcome.cancelled()

        request = asyncio.ensure_future(self.transport.request(method, url))
        waiter = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait({request, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            request.cancel()
            raise
        finally:
            waiter.cancel()

        if request.done():
            return request.result()

        request.cancel()
        await asyncio.gather(request, return_exceptions=True)
        return TransportOutcome.cancelled()

    @staticmethod
    def _terminal_result(outcome: TransportOutcome, original_key: str, final_url: str, redirects: int) -> CheckResult:
        code = outcome.status_code
        if 200 <= code < 300:
            status = CheckStatus.ACCESSIBLE
        elif code in (404, 410):
            status = CheckStatus.NOT_FOUND
        else:
            status = CheckStatus.ERROR

        message = outcome.status_line
        if redirects and normalize_url(final_url) != original_key:
            return CheckResult(
                status=status,
                message=f"{message} (redirected {redirects}x)",
                redirect_detected=True,
                redirect_url=final_url,
                redirect_count=redirects
            )
        return CheckResult(status=status, message=message, redirect_count=redirects)
