"""Dataset loading errors."""

from __future__ import annotations


class DatasetError(RuntimeError):
    """Base class for failures while loading a landscape dataset."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        """Initialise with a message and the URL being loaded."""
        self.url = url
        super().__init__(message)


class DatasetFetchError(DatasetError):
    """Raised when the dataset document could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialise with an optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message, url=url)

    @classmethod
    def http_error(cls, status_code: int, url: str) -> DatasetFetchError:
        """Return an error for a non-2xx response."""
        return cls(
            f"dataset request to {url} returned HTTP {status_code}",
            url=url,
            status_code=status_code,
        )

    @classmethod
    def transport(cls, url: str, exc: BaseException) -> DatasetFetchError:
        """Return an error for a request that never produced a response."""
        return cls(f"dataset request to {url} failed: {exc}", url=url)


class DatasetDecodeError(DatasetError):
    """Raised when a dataset body is not a valid bundle document."""

    @classmethod
    def malformed(cls, url: str, exc: BaseException) -> DatasetDecodeError:
        """Return an error for malformed JSON or an unexpected shape."""
        return cls(f"dataset at {url} could not be decoded: {exc}", url=url)


class EmbedConfigError(ValueError):
    """Raised when environment configuration is invalid."""

    @classmethod
    def invalid_mode(cls, raw: str) -> EmbedConfigError:
        """Return an error for an unknown runtime mode."""
        return cls(
            f"LANDSCAPE_EMBED_MODE must be 'development' or 'production', got: {raw!r}"
        )

    @classmethod
    def invalid_timeout(cls, raw: str) -> EmbedConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(f"LANDSCAPE_EMBED_TIMEOUT_S must be a positive number, got: {raw!r}")
