"""
Test suite configuration module.

This module defines configuration classes for the two run profiles
(local and CI). Values are loaded from environment variables with
sensible defaults, and the active profile is picked from the ``CI``
environment variable the same way most CI providers expose it.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

TARGET_URL = "https://qa-practice.netlify.app/bugs-form"

_FALSY = {"", "0", "false", "no", "off"}


def is_ci(environ: dict | None = None) -> bool:
    """Return True when the ``CI`` environment variable is set to a truthy value."""
    environ = os.environ if environ is None else environ
    return environ.get("CI", "").strip().lower() not in _FALSY


class SuiteConfig:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("TARGET_BASE_URL", TARGET_URL)

    # Browser engines passed to pytest-playwright as repeated --browser flags
    BROWSERS: tuple = tuple(
        name.strip()
        for name in os.environ.get("TEST_BROWSERS", "chromium").split(",")
        if name.strip()
    )

    FORBID_FOCUSED: bool = False
    RETRIES: int = 0
    WORKERS: str = "auto"

    # pytest-playwright only knows on / off / retain-on-failure
    TRACING: str = "retain-on-failure"

    EXPECT_TIMEOUT_MS: int = int(os.environ.get("EXPECT_TIMEOUT_MS", "5000"))
    REACHABILITY_TIMEOUT_S: int = int(os.environ.get("REACHABILITY_TIMEOUT_S", "30"))

    VIEWPORT: dict = {"width": 1280, "height": 720}

    REPORT_DIR: Path = Path(os.environ.get("REPORT_DIR", BASE_DIR / "test-results"))


class LocalConfig(SuiteConfig):
    """Local run: full parallelism, no retries."""


class CIConfig(SuiteConfig):
    """CI run: focused tests forbidden, retries on, a single worker."""

    FORBID_FOCUSED: bool = True
    RETRIES: int = 2
    WORKERS: str = "1"


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[SuiteConfig]:
    """
    Get the configuration class for the specified profile.

    Args:
        env: Profile name (local, ci).
             If None, the CI environment variable decides.

    Returns:
        Configuration class for the specified profile.
    """
    if env is None:
        env = "ci" if is_ci() else "local"
    return config.get(env, config["default"])
