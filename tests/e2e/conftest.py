"""Playwright fixtures for the bugs-form E2E scenarios."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from faker import Faker
from playwright.sync_api import Page, expect

from config import SuiteConfig, get_config
from harness.target import wait_for_target_reachable
from tests.e2e.data.form_records import VALID_USER, FormRecord
from tests.e2e.pages.bugs_form_page import BugsFormPage

fake = Faker()


@pytest.fixture(scope="session")
def suite_config() -> type[SuiteConfig]:
    """Configuration class of the active run profile."""
    return get_config()


@pytest.fixture(scope="session")
def target_url(base_url: str | None, suite_config: type[SuiteConfig]) -> str:
    """
    URL of the form under test, verified reachable once per session.

    ``--base-url`` wins over the profile's ``BASE_URL``. An unreachable
    target raises, so every scenario reports a navigation failure.
    """
    url = base_url or suite_config.BASE_URL
    wait_for_target_reachable(url, timeout=suite_config.REACHABILITY_TIMEOUT_S)
    return url


@pytest.fixture(scope="session", autouse=True)
def expect_timeout(suite_config: type[SuiteConfig]) -> None:
    expect.set_options(timeout=suite_config.EXPECT_TIMEOUT_MS)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict, suite_config: type[SuiteConfig]) -> dict:
    return {
        **browser_context_args,
        "viewport": dict(suite_config.VIEWPORT),
        "ignore_https_errors": True,
    }


@pytest.fixture
def bugs_form_page(page: Page, target_url: str) -> BugsFormPage:
    """BugsFormPage already navigated to the form in a fresh context."""
    return BugsFormPage(page, target_url).navigate()


@pytest.fixture
def record_factory() -> Callable[..., FormRecord]:
    """Factory for otherwise-valid records with generated names."""

    def _make(**overrides) -> FormRecord:
        record = VALID_USER.with_overrides(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
        )
        return record.with_overrides(**overrides)

    return _make
