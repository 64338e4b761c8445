"""Run context binding for structured logging.

Binds run-scoped metadata so that every log entry emitted during a
synchronization run carries the same run identifier.

Usage:
    from infrastructure.logging import bind_run_context

    with bind_run_context(source_language="en", service="deepl"):
        logger.info("sync_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_run_context(
    run_id: Optional[str] = None,
    source_language: Optional[str] = None,
    service: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind run-scoped context to all logs within the context manager.

    Args:
        run_id: Unique run identifier. Auto-generated if not provided.
        source_language: Template language of the run.
        service: Name of the translation provider used.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"run_id": run_id or str(uuid.uuid4())}

    if source_language is not None:
        context["source_language"] = source_language

    if service is not None:
        context["service"] = service

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
