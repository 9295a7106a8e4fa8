# -*- coding: utf-8 -*-
"""
Link State - URL accessibility checks for bookmark collections.

This module provides invoke tasks for checking whether stored bookmarks are
still reachable, probing single URLs and resetting stored link statuses.

Usage examples:
    # Check every web link of a bookmark file and store the results:
    invoke check-links --path="bookmarks.json" --save

    # Check links and write a CSV report:
    invoke check-links --path="bookmarks.json" --report

    # Probe a single URL:
    invoke check-url --url="https://example.com"

    # Forget all stored link statuses:
    invoke reset-links --path="bookmarks.json"
"""
from datetime import datetime
from os.path import join
from typing import Optional
import asyncio
import logging

from invoke import task
from rich import print

from linkstate import MyConsole
from linkstate.bookmarks import load_bookmarks, save_bookmarks
from linkstate.url_checker import (
    CheckerConfig,
    CheckInProgressError,
    CheckStatus,
    LinkCheckReport,
    TargetDetachedError,
    URLStateChecker,
    collect_targets,
)

STATUS_STYLES = {
    CheckStatus.ACCESSIBLE: "green",
    CheckStatus.NOT_FOUND: "red",
    CheckStatus.ERROR: "yellow",
    CheckStatus.UNKNOWN: "dim",
}


@task
def check_links(
    c,
    path: str,
    config: Optional[str] = None,
    report: bool = False,
    save: bool = False,
    verbose: bool = False,
):
    """
    Check accessibility of every web link in a bookmark file.

    :param c: Context (invoke requirement)
    :param path: Path to the bookmark JSON file
    :param config: Path to the checker JSON config (optional)
    :param report: Write a CSV report to the configured report directory
    :param save: Write the updated statuses back to the bookmark file
    :param verbose: Enable debug logging
    """
    _setup_logging(verbose)
    checker_config = CheckerConfig.load(config)
    root = load_bookmarks(path)
    targets = collect_targets(root)
    checker = URLStateChecker(config=checker_config)

    def on_progress(current: int, total: int, url: str, node) -> None:
        display_url = url if len(url) <= 60 else f"{url[:57]}..."
        print(f"[dim]Checking {current}/{total}: {display_url}[/dim]")

    try:
        statistics = checker.run(root, progress_callback=on_progress, stdout=True)
    except (CheckInProgressError, TargetDetachedError) as e:
        print(f"[red]|ERROR| {e}[/]")
        return
    except KeyboardInterrupt:
        print("[yellow]URL check cancelled by user[/]")
        return

    for target, _ in targets:
        if target.status is not CheckStatus.ACCESSIBLE:
            style = STATUS_STYLES[target.status]
            print(f"[{style}]{target.status.display_text}[/{style}]: {target.title or target.url} ({target.status_message})")
        if target.has_redirect:
            print(f"[cyan]Redirect[/cyan]: {target.url} -> {target.redirect_url}")

    if report:
        report_path = join(checker_config.report_dir, f"links_{datetime.now():%Y%m%d_%H%M%S}.csv")
        LinkCheckReport(report_path).write(targets)
        print(f"[green]|INFO| Report saved to {report_path}[/]")

    if save and not statistics.cancelled:
        save_bookmarks(root, path)
        print(f"[green]|INFO| Link statuses saved to {path}[/]")


@task
def check_url(c, url: str, config: Optional[str] = None):
    """
    Check a single URL and print its status.

    :param c: Context (invoke requirement)
    :param url: URL to check
    :param config: Path to the checker JSON config (optional)
    """
    checker = URLStateChecker(config=CheckerConfig.load(config))
    with MyConsole().status(f"Checking {url}..."):
        result = asyncio.run(checker.check_url_with_redirect(url))

    style = STATUS_STYLES[result.status]
    print(f"[{style}]{result.status.display_text}[/{style}]: {result.message}")
    if result.redirect_detected:
        print(f"[cyan]Redirected {result.redirect_count}x to {result.redirect_url}[/cyan]")


@task
def reset_links(c, path: str):
    """
    Reset the stored status of every web link in a bookmark file.

    :param c: Context (invoke requirement)
    :param path: Path to the bookmark JSON file
    """
    root = load_bookmarks(path)
    count = URLStateChecker().reset_statuses(root)
    save_bookmarks(root, path)
    print(f"[green]|SUCCESS| Status of {count} links reset[/]")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
