"""Structured log events for dataset loading.

Every load emits a start event followed by either a completion or a
failure event. Failures carry an :class:`ErrorCategory` so log consumers
can separate transient transport trouble from malformed datasets.
"""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

from landscape_embed.errors import DatasetDecodeError, DatasetFetchError
from landscape_embed.logging import get_logger, log_error, log_info

if typ.TYPE_CHECKING:
    import datetime as dt

logger = get_logger(__name__)

_HTTP_SERVER_ERROR_THRESHOLD = 500


class LoadEventType(enum.StrEnum):
    """Structured log event types for dataset loads."""

    LOAD_STARTED = "dataset.load.started"
    LOAD_COMPLETED = "dataset.load.completed"
    LOAD_FAILED = "dataset.load.failed"


class ErrorCategory(enum.StrEnum):
    """Categories for load failures."""

    TRANSIENT = "transient"
    CLIENT_ERROR = "client_error"
    SCHEMA_DRIFT = "schema_drift"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True, slots=True)
class LoadContext:
    """Identifies a single dataset load."""

    name: str
    url: str
    started_at: dt.datetime


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize a load failure.

    Transport failures and 5xx responses are transient; other HTTP
    failures are client errors; undecodable bodies indicate schema drift.
    """
    if isinstance(exc, DatasetFetchError):
        if exc.status_code is None or exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD:
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR
    if isinstance(exc, DatasetDecodeError):
        return ErrorCategory.SCHEMA_DRIFT
    return ErrorCategory.UNKNOWN


class DatasetEventLogger:
    """Emit dataset load events via femtologging."""

    def log_load_started(self, context: LoadContext) -> None:
        """Log the start of a load."""
        log_info(
            logger,
            "[%s] name=%s url=%s started_at=%s",
            LoadEventType.LOAD_STARTED,
            context.name,
            context.url,
            context.started_at.isoformat(),
        )

    def log_load_completed(
        self,
        context: LoadContext,
        *,
        item_count: int,
        duration: dt.timedelta,
    ) -> None:
        """Log a load that stored a dataset in the cache."""
        log_info(
            logger,
            "[%s] name=%s url=%s duration_seconds=%.3f item_count=%d",
            LoadEventType.LOAD_COMPLETED,
            context.name,
            context.url,
            duration.total_seconds(),
            item_count,
        )

    def log_load_failed(
        self,
        context: LoadContext,
        error: BaseException,
        duration: dt.timedelta,
    ) -> None:
        """Log a failed load with its error category."""
        log_error(
            logger,
            "[%s] name=%s url=%s duration_seconds=%.3f "
            "error_type=%s error_category=%s error_message=%s",
            LoadEventType.LOAD_FAILED,
            context.name,
            context.url,
            duration.total_seconds(),
            type(error).__name__,
            categorize_error(error),
            str(error),
            exc_info=error,
        )
