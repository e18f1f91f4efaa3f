"""Exceptions raised by the slug resolution engine.

Classes:
    SlugcastError:
        Base class for every error raised by this package.

    SlugConflictError:
        A caller-supplied slug already maps to a different URL.

    SlugSpaceExhaustedError:
        Every candidate window of a URL's digest is taken by other URLs.

    StoreError:
        The underlying storage operation failed (I/O, timeout, unexpected constraint).

    InvalidRequestError:
        The URL or the requested slug failed validation.
"""


class SlugcastError(Exception):
    """Generic base class for slugcast exceptions."""

    pass


class SlugConflictError(SlugcastError):
    """Raised when a requested slug is already registered for another URL."""

    def __init__(self, slug: str, existing_url: str):
        self.slug = slug
        self.existing_url = existing_url
        super().__init__(f"Slug '{slug}' is already registered for a different URL")


class SlugSpaceExhaustedError(SlugcastError):
    """Raised when no candidate window yields a free or matching slug."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unable to find a free slug for {url}")


class StoreError(SlugcastError):
    """Raised when the storage backend fails.

    e.g. connection issues, timeouts, driver errors.
    """

    pass


class InvalidRequestError(SlugcastError):
    """Raised when the URL or requested slug is not acceptable."""

    pass
