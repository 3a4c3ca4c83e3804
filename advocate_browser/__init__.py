"""
Top-level package for the advocate browser.

This package exposes the core architecture (records, search, state), the
service layer that talks to the advocates backend and the Dash UI adapter.
Most code should import from submodules such as:
    advocate_browser.core
    advocate_browser.services
    advocate_browser.ui
"""

__all__: list[str] = []
