"""
Marker handling for defect documentation and focused runs.

Two custom markers are understood by the suite:

- ``known_defect(reason, strict=True)`` flags a scenario that asserts the
  intended behaviour of the target page and is expected to fail while the
  defect is live. At collection time it becomes an ``xfail`` restricted to
  ``AssertionError``, so a timeout or a broken locator still shows up as a
  real failure. A strict XPASS signals that the page got fixed.
- ``focus`` narrows a run down to the marked tests, and is rejected
  outright when focused tests are forbidden (CI profile).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import pytest

KNOWN_DEFECT = "known_defect"
FOCUS = "focus"

STATUS_OPEN = "OPEN"
STATUS_FIXED = "FIXED?"
STATUS_BROKEN = "BROKEN"


def known_defect_xfail(mark: pytest.Mark) -> pytest.MarkDecorator:
    """
    Translate a ``known_defect`` mark into the equivalent ``xfail`` mark.

    Args:
        mark: The ``known_defect`` mark found on a test item.

    Returns:
        An ``xfail`` mark decorator carrying the defect description.

    Raises:
        pytest.UsageError: If the mark has no reason.
    """
    reason = mark.kwargs.get("reason") or (mark.args[0] if mark.args else "")
    if not reason:
        raise pytest.UsageError("known_defect marker requires a reason describing the defect")
    return pytest.mark.xfail(
        reason=f"Known defect: {reason}",
        raises=AssertionError,
        strict=mark.kwargs.get("strict", True),
    )


def select_focused(items: Sequence[Any]) -> tuple[list[Any], list[Any]]:
    """
    Split collected items into (selected, deselected) honouring ``focus``.

    When no item carries the ``focus`` marker every item stays selected.
    """
    focused = [item for item in items if item.get_closest_marker(FOCUS) is not None]
    if not focused:
        return list(items), []
    deselected = [item for item in items if item.get_closest_marker(FOCUS) is None]
    return focused, deselected


def check_focus_allowed(focused: Iterable[Any], forbid: bool) -> None:
    """Raise ``pytest.UsageError`` when focused tests exist but are forbidden."""
    node_ids = [item.nodeid for item in focused]
    if forbid and node_ids:
        raise pytest.UsageError(
            "Focused tests are forbidden in this run: " + ", ".join(node_ids)
        )


def _known_defect_reports(stats: dict[str, list[Any]], outcome: str) -> list[Any]:
    """Reports for ``outcome`` that come from ``known_defect`` scenarios only."""
    return [
        report
        for report in stats.get(outcome, [])
        if KNOWN_DEFECT in getattr(report, "keywords", {})
    ]


def summarize_known_defects(stats: dict[str, list[Any]]) -> list[tuple[str, str, str]]:
    """
    Build the known-defect table from terminal reporter statistics.

    Args:
        stats: ``terminalreporter.stats`` mapping outcome to reports.

    Returns:
        ``(status, nodeid, detail)`` rows, one per known-defect scenario.
    """
    rows = []
    for report in _known_defect_reports(stats, "xfailed"):
        rows.append((STATUS_OPEN, report.nodeid, getattr(report, "wasxfail", "")))
    for report in _known_defect_reports(stats, "xpassed"):
        rows.append((STATUS_FIXED, report.nodeid, getattr(report, "wasxfail", "")))
    for report in _known_defect_reports(stats, "failed"):
        if getattr(report, "when", "call") != "call":
            continue
        longrepr = str(report.longrepr)
        if "XPASS(strict)" in longrepr:
            rows.append((STATUS_FIXED, report.nodeid, longrepr))
        else:
            rows.append((STATUS_BROKEN, report.nodeid, longrepr.splitlines()[-1] if longrepr else ""))
    return rows
