"""
Error handling utilities for document validation operations.

This module provides custom exceptions and decorators for consistent error handling
across the application.
"""
import logging
import time
import uuid
from typing import Callable, TypeVar, ParamSpec
from functools import wraps
from contextvars import ContextVar

logger = logging.getLogger(__name__)

# Context variable for validation ID tracking across nested calls
validation_id_var: ContextVar[str] = ContextVar('validation_id', default='')

# Type variables for generic function signatures
P = ParamSpec('P')
T = TypeVar('T')


# ============================================================================
# Custom Exceptions
# ============================================================================

class DocumentGateError(Exception):
    """Base exception for document gate errors."""
    pass


class ConfigurationError(DocumentGateError):
    """Gate not properly configured."""
    pass


class ValidationExecutionError(DocumentGateError):
    """Validation call failed unexpectedly."""
    pass


# ============================================================================
# Error Handler Decorator
# ============================================================================

def handle_validation_errors(
    error_message: str = "Validation failed"
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator to handle errors in validation operations.

    Tags the call with a validation ID, logs start and completion with timing,
    and converts unexpected exceptions into ValidationExecutionError. Errors
    that are already DocumentGateError subclasses propagate unchanged.

    Args:
        error_message: Custom error message prefix

    Returns:
        Decorated function with error handling

    Example:
        @handle_validation_errors("Failed to validate document")
        def validate(text: str) -> ValidationResult:
            # Your validation logic here
            pass
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            """Wrapper for error handling with validation tracking and timing."""
            # Nested calls share the outermost validation ID
            token = None
            if not validation_id_var.get():
                token = validation_id_var.set(str(uuid.uuid4()))

            validation_id = validation_id_var.get()
            start_time = time.perf_counter()

            try:
                logger.debug(f"[{validation_id}] Starting {func.__name__}")
                result = func(*args, **kwargs)
                elapsed = time.perf_counter() - start_time

                # Log with warning if the call exceeds the threshold
                from docgate.core.config import settings
                threshold_ms = settings.SLOW_VALIDATION_WARNING_THRESHOLD_MS
                elapsed_ms = elapsed * 1000
                if elapsed_ms > threshold_ms:
                    logger.warning(
                        f"[{validation_id}] SLOW VALIDATION: {func.__name__} took {elapsed_ms:.1f}ms "
                        f"(> {threshold_ms}ms threshold)"
                    )
                else:
                    logger.debug(f"[{validation_id}] Completed {func.__name__} in {elapsed_ms:.1f}ms")

                return result
            except DocumentGateError as e:
                elapsed = time.perf_counter() - start_time
                logger.error(f"[{validation_id}] {error_message} after {elapsed:.3f}s: {e}")
                raise
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                logger.exception(
                    f"[{validation_id}] {error_message} - Unexpected error in {func.__name__} "
                    f"after {elapsed:.3f}s: {e}"
                )
                raise ValidationExecutionError(f"{error_message}: {str(e)}") from e
            finally:
                if token is not None:
                    validation_id_var.reset(token)

        return wrapper  # type: ignore

    return decorator
