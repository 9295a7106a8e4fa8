# -*- coding: utf-8 -*-


class LinkCheckError(Exception):
    """Base class for link checker errors."""


class CheckInProgressError(LinkCheckError):
    """Raised when a batch is started while another one is still running."""


class CheckCancelledError(LinkCheckError):
    """Raised when the user cancels a check while a request is in flight."""


class TargetDetachedError(LinkCheckError):
    """Raised when a collected tree node no longer holds its link target."""
