"""
Test Support

Fakes and helpers shared by unit and e2e tests.

Usage:
    from tests.support.page_fakes import make_mock_page, fail_click
"""
