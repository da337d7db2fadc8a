"""
Browser scenarios for the bugs-form registration page.

This package contains Playwright-based end-to-end tests together with
the page objects and static form records they drive.
"""
