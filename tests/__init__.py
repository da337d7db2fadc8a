"""
Test suite for the bugs-form registration page.

This package contains:
- e2e/: Browser scenarios driven through Playwright, with page objects
  and static form records
- unit/: Browser-free tests for the records, page object and harness
"""
