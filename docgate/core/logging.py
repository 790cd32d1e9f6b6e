"""
Logging setup for the document gate.

Verdict log lines carry their structured fields (policy, percentage, counts)
under the ``extra_fields`` record attribute, see ``verdict_extra``. The JSON
formatter merges them into the log object; the text formatter appends them
as ``key=value`` pairs.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict

from docgate.core.config import settings
from docgate.core.error_handling import validation_id_var
from docgate.models.validation_models import ValidationResult

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def verdict_extra(result: ValidationResult) -> Dict[str, Any]:
    """
    Build the ``extra`` mapping for logging a validation verdict.

    Fields that do not apply to the result's policy are left out.
    """
    fields = {
        "policy": result.policy.value,
        "is_match": result.is_match,
        "percentage": round(result.percentage, 4),
        "matched_count": result.matched_count,
        "total_keywords": result.total_keywords,
        "matched_reference_tokens": result.matched_reference_tokens,
        "total_reference_tokens": result.total_reference_tokens,
    }
    return {"extra_fields": {key: value for key, value in fields.items() if value is not None}}


class ValidationIDFilter(logging.Filter):
    """
    Inject the current validation_id (from ContextVar) into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.validation_id = validation_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line, with verdict fields merged in at the top level.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        validation_id = getattr(record, "validation_id", "")
        if validation_id:
            log_obj["validation_id"] = validation_id

        log_obj.update(getattr(record, "extra_fields", {}))

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False)


class VerdictTextFormatter(logging.Formatter):
    """
    Plain text formatter that appends verdict fields and the validation id.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)

        extra_fields = getattr(record, "extra_fields", {})
        if extra_fields:
            line += " [" + " ".join(f"{key}={value}" for key, value in extra_fields.items()) + "]"

        validation_id = getattr(record, "validation_id", "")
        if validation_id:
            line += f" - validation_id={validation_id}"
        return line


def setup_logging() -> None:
    """
    Route docgate logs to stdout as text or JSON, per LOG_FORMAT and LOG_LEVEL.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(VerdictTextFormatter(TEXT_LOG_FORMAT))

    if settings.LOG_INCLUDE_VALIDATION_ID:
        handler.addFilter(ValidationIDFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace handlers so repeated setup does not duplicate output
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)
