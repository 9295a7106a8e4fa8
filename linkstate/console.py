# -*- coding: utf-8 -*-
"""
Console output of the link checker.

The batch summary and the invoke tasks print through the lock guarded
``print`` so progress lines from a checker running in a worker thread do not
interleave with the caller's output. ``MyConsole`` provides the status
spinner shown while a single URL is probed.
"""
import threading

from rich import print as rprint
from rich.console import Console

from .decorators import class_cache

console_lock = threading.Lock()


def print(msg: str) -> None:
    """
    Print message with console lock.
    """
    with console_lock:
        rprint(msg)


@class_cache
class MyConsole:
    """
    Wrapper class for Rich Console with common functionality.

    Provides easy access to Rich console features like printing and status indicators.
    """

    def __init__(self):
        self.console = Console()
        self.print = self.console.print
        self.status = self.console.status
