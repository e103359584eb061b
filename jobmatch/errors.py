"""Error classes shared by the API and the client."""


class JobMatchError(Exception):
    """Base error. `message` is safe to show to the user as-is."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JobMatchError):
    """Missing or malformed request fields."""

    status_code = 400


class NotFoundError(JobMatchError):
    """A store operation referenced a record id that does not exist."""

    status_code = 404


class UpstreamError(JobMatchError):
    """The model service (or another upstream) failed or returned unusable output."""

    status_code = 502


class UpstreamTimeoutError(UpstreamError):
    """The upstream call exceeded the configured ceiling."""

    status_code = 504


class UnavailableError(JobMatchError):
    """Transport-level failure: connection refused, DNS, non-2xx from our own backend."""

    status_code = 503


class StoreNotConfiguredError(UnavailableError):
    """DATABASE_URL is not set."""

    def __init__(self, message: str = "Resume storage is not configured"):
        super().__init__(message)
