"""Reachability checks for the externally hosted form under test."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


class TargetUnreachableError(RuntimeError):
    """The target page did not answer with a successful status in time."""


def is_target_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the target page answers with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Target %s not reachable yet: %s", url, exc)
        return False
    return response.status_code < 400


def wait_for_target_reachable(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the target page until it answers or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_target_reachable(url):
            logger.info("Target page reachable: %s", url)
            return
        time.sleep(interval)
    raise TargetUnreachableError(f"Target page at {url} not reachable after {timeout}s")
