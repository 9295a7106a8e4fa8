# -*- coding: utf-8 -*-
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Optional, Protocol
import asyncio
import logging

import aiohttp
from aiohttp import ClientSession, ClientTimeout, ClientConnectorError

from .config import CheckerConfig

REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})


class OutcomeKind(Enum):
    RESPONSE = "response"
    REDIRECT = "redirect"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"
    UNREACHABLE = "unreachable"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class TransportOutcome:
    """
    Result of a single HTTP attempt.

    Response kinds carry the status code and reason phrase, ``REDIRECT``
    also carries the raw Location header (None when absent), failure kinds
    carry an error description.
    """
    kind: OutcomeKind
    status_code: Optional[int] = None
    reason: str = ""
    location: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_status(cls, status_code: int, reason: Optional[str] = None, location: Optional[str] = None) -> "TransportOutcome":
        """
        Classify an HTTP response by its status code.

        :param status_code: Numeric HTTP status.
        :param reason: Reason phrase, looked up from the status when missing.
        :param location: Location header value, if any.
        :return: TransportOutcome instance.
        """
        if status_code in REDIRECT_CODES:
            kind = OutcomeKind.REDIRECT
        elif status_code == 405:
            kind = OutcomeKind.METHOD_NOT_ALLOWED
        else:
            kind = OutcomeKind.RESPONSE
        return cls(kind=kind, status_code=status_code, reason=reason or _reason_phrase(status_code), location=location)

    @classmethod
    def timed_out(cls) -> "TransportOutcome":
        return cls(kind=OutcomeKind.TIMED_OUT)

    @classmethod
    def cancelled(cls) -> "TransportOutcome":
        return cls(kind=OutcomeKind.CANCELLED)

    @classmethod
    def unreachable(cls, error: str) -> "TransportOutcome":
        return cls(kind=OutcomeKind.UNREACHABLE, error=error)

    @classmethod
    def transport_error(cls, error: str) -> "TransportOutcome":
        return cls(kind=OutcomeKind.TRANSPORT_ERROR, error=error)

    @property
    def status_line(self) -> str:
        return f"HTTP {self.status_code} {self.reason}".strip()


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class Transport(Protocol):
    async def request(self, method: str, url: str) -> TransportOutcome:
        ...


class AiohttpTransport:
    """
    HTTP transport on top of a single aiohttp session.

    Redirects are never followed here: the caller inspects every hop.
    Use as an async context manager so the session is closed after the batch.

    :param config: Checker configuration (timeouts, user agent, ssl).
    """

    def __init__(self, config: Optional[CheckerConfig] = None):
        self.config = config or CheckerConfig()
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "AiohttpTransport":
        timeout = ClientTimeout(total=self.config.timeout, connect=self.config.connect_timeout)
        connector = aiohttp.TCPConnector(
            limit_per_host=4,
            enable_cleanup_closed=True,
            ssl=True if self.config.verify_ssl else False
        )
        self.session = ClientSession(
            timeout=timeout,
            connector=connector,
            headers={"User-Agent": self.config.user_agent}
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def request(self, method: str, url: str) -> TransportOutcome:
        """
        Send one request and read only the status line and headers.

        :param method: HTTP method (HEAD or GET).
        :param url: Absolute URL.
        :return: TransportOutcome instance.
        """
        if self.session is None:
            raise RuntimeError("AiohttpTransport must be used as an async context manager")

        try:
            async with self.session.request(method, url, allow_redirects=False) as response:
                return TransportOutcome.from_status(
                    status_code=response.status,
                    reason=response.reason,
                    location=response.headers.get("Location")
                )
        except asyncio.TimeoutError:
            self.logger.debug(f"Timeout for {method} {url}")
            return TransportOutcome.timed_out()
        except ClientConnectorError as e:
            self.logger.debug(f"Connection error for {method} {url}: {e}")
            return TransportOutcome.unreachable(str(e))
        except (aiohttp.ClientError, ValueError) as e:
            self.logger.debug(f"Request error for {method} {url}: {e}")
            return TransportOutcome.transport_error(str(e) or type(e).__name__)
