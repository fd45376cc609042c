"""observe_ui exception hierarchy.

This module defines the base exception class and the two failure kinds a
page object can raise: an element that never resolved, and visible text
that did not match.
"""


class ObserveUIError(Exception):
    """Base exception for all observe_ui errors.

    All custom exceptions in observe_ui should inherit from this class
    so callers can catch page-object failures in one place.
    """

    pass


class ConfigurationError(ObserveUIError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Missing required env var: ZO_ROOT_USER_PASSWORD")
    """

    pass


class ElementResolutionError(ObserveUIError):
    """Raised when a locator matches no interactable element in time.

    Attributes:
        locator: Semantic name of the locator, e.g. ``profile_button``.
        selector: Selector or text the locator was built from.
        timeout_ms: Timeout that elapsed, None if the failure was immediate.

    Example:
        raise ElementResolutionError("alert_menu", "[data-test=...]", timeout_ms=15000)
    """

    def __init__(
        self,
        locator: str,
        selector: str,
        timeout_ms: float | None = None,
        reason: str | None = None,
    ) -> None:
        self.locator = locator
        self.selector = selector
        self.timeout_ms = timeout_ms
        message = f"{locator}: no element for {selector!r}"
        if timeout_ms is not None:
            message += f" within {timeout_ms:g} ms"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TextAssertionError(AssertionError, ObserveUIError):
    """Raised when an element's visible text does not contain the expected text.

    Subclasses AssertionError so pytest reports it as an assertion failure
    rather than an error.

    Attributes:
        locator: Semantic name of the asserted locator.
        expected: Text that should have been contained.
        actual: Text the element showed, None if it could not be read.
    """

    def __init__(self, locator: str, expected: str, actual: str | None) -> None:
        self.locator = locator
        self.expected = expected
        self.actual = actual
        super().__init__(f"{locator}: expected text containing {expected!r}, got {actual!r}")
