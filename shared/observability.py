"""
Error reporting for work that must not fail the request.

Side effects such as lead recording run after the user already has what
they asked for; when one breaks it is logged and sent to Sentry here
instead of being raised.
"""

from __future__ import annotations

from typing import Any

import sentry_sdk

from shared.logging import get_logger

log = get_logger(__name__)


def report_side_effect_failure(event: str, exc: BaseException, **context: Any) -> None:
    """Log *exc* under *event* with *context* and forward it to Sentry.

    sentry_sdk.capture_exception is a no-op when Sentry was never initialised.
    """
    log.error(
        event,
        error=str(exc),
        error_type=type(exc).__name__,
        **context,
    )
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("side_effect", event)
        for key, value in context.items():
            scope.set_extra(key, value)
        sentry_sdk.capture_exception(exc)
