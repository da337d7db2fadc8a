"""
Command-line runner for the bugs-form suite.

Builds the pytest command line from the active run profile (see
:mod:`config`) and hands it to :func:`pytest.main`. The local profile
runs with full parallelism and no retries; the CI profile forbids
focused tests, retries failures twice and uses a single worker.

Every run writes its artefacts under the profile's report directory:

- ``report.html``: self-contained pytest-html report
- ``junit.xml``: machine-readable results for CI
- ``artifacts/``: Playwright traces for failed runs
- ``screenshots/``: page screenshots captured on failure

Exit codes are pytest's own, so CI can gate on them directly.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import pytest

from config import SuiteConfig, get_config

logger = logging.getLogger(__name__)

DEFAULT_TEST_PATH = "tests"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the suite runner."""
    parser = argparse.ArgumentParser(
        description="Run the bugs-form UI suite against one or more browser engines."
    )
    parser.add_argument(
        "--browser",
        action="append",
        dest="browsers",
        choices=("chromium", "firefox", "webkit"),
        help="Browser engine to run against (repeatable, defaults to the profile's list)",
    )
    parser.add_argument("--headed", action="store_true", help="Run browsers headed")
    parser.add_argument("--base-url", help="Override the target form URL")
    parser.add_argument("--ci", action="store_true", help="Force the CI profile")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching this expression")
    parser.add_argument(
        "--defects-as-failures",
        action="store_true",
        help="Report known-defect scenarios as plain failures instead of xfail",
    )
    parser.add_argument(
        "pytest_args",
        nargs=argparse.REMAINDER,
        help="Extra arguments passed to pytest after '--'",
    )
    return parser.parse_args(argv)


def build_pytest_args(
    cfg: type[SuiteConfig],
    *,
    browsers: Sequence[str] | None = None,
    headed: bool = False,
    base_url: str | None = None,
    keyword: str | None = None,
    defects_as_failures: bool = False,
    extra: Sequence[str] = (),
) -> list[str]:
    """
    Translate a run profile and CLI choices into pytest arguments.

    Args:
        cfg: Configuration class of the active profile.
        browsers: Browser engines; falls back to ``cfg.BROWSERS``.
        headed: Whether to show the browser window.
        base_url: Target URL; falls back to ``cfg.BASE_URL``.
        keyword: Optional ``-k`` expression.
        defects_as_failures: Disable the known-defect to xfail conversion.
        extra: Additional raw pytest arguments, appended last.

    Returns:
        The argument list for :func:`pytest.main`.
    """
    report_dir = cfg.REPORT_DIR
    args = [DEFAULT_TEST_PATH, "-ra"]

    for browser in browsers or cfg.BROWSERS:
        args.extend(["--browser", browser])
    if headed:
        args.append("--headed")

    args.extend(["--base-url", base_url or cfg.BASE_URL])
    args.extend(["--tracing", cfg.TRACING, "--output", str(report_dir / "artifacts")])

    if cfg.RETRIES > 0:
        args.extend(["--reruns", str(cfg.RETRIES)])
    if cfg.WORKERS not in ("", "0"):
        args.extend(["-n", cfg.WORKERS])
    if cfg.FORBID_FOCUSED:
        args.append("--forbid-focused")
    if defects_as_failures:
        args.append("--defects-as-failures")
    if keyword:
        args.extend(["-k", keyword])

    args.extend(
        [
            f"--junitxml={report_dir / 'junit.xml'}",
            f"--html={report_dir / 'report.html'}",
            "--self-contained-html",
        ]
    )
    args.extend(extra)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point: pick the profile, build the pytest command and run it.

    Returns:
        pytest's exit code.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = parse_args(argv)
    cfg = get_config("ci" if args.ci else None)

    extra = list(args.pytest_args or [])
    if extra and extra[0] == "--":
        extra = extra[1:]

    pytest_args = build_pytest_args(
        cfg,
        browsers=args.browsers,
        headed=args.headed,
        base_url=args.base_url,
        keyword=args.keyword,
        defects_as_failures=args.defects_as_failures,
        extra=extra,
    )
    cfg.REPORT_DIR.mkdir(parents=True, exist_ok=True)

    logger.info("Running suite with %s: pytest %s", cfg.__name__, " ".join(pytest_args))
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    raise SystemExit(main())
