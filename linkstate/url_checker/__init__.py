# -*- coding: utf-8 -*-
from .check_status import CheckStatus
from .check_result import CheckResult
from .link_target import LinkTarget
from .run_statistics import RunStatistics, ResultAggregator
from .url_normalizer import normalize_url, is_http_url
from .config import CheckerConfig
from .transport import AiohttpTransport, OutcomeKind, Transport, TransportOutcome
from .check_session import CancellationSignal, CheckSession
from .exceptions import LinkCheckError, CheckInProgressError, CheckCancelledError, TargetDetachedError
from .redirect_resolver import RedirectResolver
from .target_collector import CollectedTarget, collect_targets
from .url_state_checker import URLStateChecker
from .report import LinkCheckReport

__all__ = [
    "CheckStatus", "CheckResult", "LinkTarget", "RunStatistics", "ResultAggregator",
    "normalize_url", "is_http_url", "CheckerConfig",
    "AiohttpTransport", "OutcomeKind", "Transport", "TransportOutcome",
    "CancellationSignal", "CheckSession",
    "LinkCheckError", "CheckInProgressError", "CheckCancelledError", "TargetDetachedError",
    "RedirectResolver", "CollectedTarget", "collect_targets", "URLStateChecker", "LinkCheckReport",
]
