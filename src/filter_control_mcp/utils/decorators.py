"""Decorators for consistent tool error handling."""

import functools
import json
import logging
import uuid
from datetime import datetime
from typing import Any, Callable

from ..exceptions import FilterControlError, InvalidFilterError, TranslationError

logger = logging.getLogger(__name__)


def error_response(error_code: str, message: str, request_id: str, **extra: Any) -> str:
    """Format a JSON error envelope."""
    response = {
        "success": False,
        "error": error_code,
        "message": message,
        **extra,
        "metadata": {
            "timestamp": datetime.now().isoformat() + "Z",
            "request_id": request_id,
        },
    }
    return json.dumps(response, indent=2)


def handle_filter_errors(func: Callable[..., str]) -> Callable[..., str]:
    """Decorator to handle filter control errors consistently.

    Args:
        func: The tool function to decorate

    Returns:
        Decorated function that returns a JSON error envelope instead of raising
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        try:
            logger.info(f"Request {request_id}: Starting {func.__name__}")
            result = func(*args, **kwargs)

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.info(f"Request {request_id}: Completed {func.__name__} in {duration_ms}ms")

            return result

        except json.JSONDecodeError as e:
            logger.warning(f"Request {request_id}: Invalid JSON input: {e}")
            return error_response("invalid_json", f"Input must be valid JSON: {e.msg}", request_id)

        except InvalidFilterError as e:
            logger.warning(f"Request {request_id}: Invalid filter: {e}")
            return error_response("invalid_filter", str(e), request_id, details=e.errors)

        except TranslationError as e:
            logger.exception(f"Request {request_id}: Translation failed for {e.key}")
            return error_response("translation_error", str(e), request_id)

        except FilterControlError as e:
            logger.exception(f"Request {request_id}: Filter control error: {e}")
            return error_response("filter_error", str(e), request_id)

        except Exception as e:
            logger.exception(f"Request {request_id}: Unexpected error in {func.__name__}")
            return error_response("internal_error", f"An unexpected error occurred: {e!s}", request_id)

    return wrapper
