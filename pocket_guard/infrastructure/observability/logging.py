"""Structured JSON logging for loan and tax calculations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List
from pythonjsonlogger import jsonlogger

from pocket_guard.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping every record with UTC time, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger to stdout as one JSON object per line"""
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_calculation(
    request_id: str,
    kind: str,
    duration_ms: float,
    **fields: Any,
) -> None:
    """
    Log one served calculation.

    kind is emi | amortization | remaining_balance | tax | pan_eligibility;
    fields carry the few inputs worth grouping by (tenure, schedule length,
    month, tax bracket, eligibility). Amounts are never logged.
    """
    logging.info(
        f"{kind} calculation completed",
        extra={
            "request_id": request_id,
            "step": f"{kind}_complete",
            "calculation": kind,
            "duration_ms": round(duration_ms, 3),
            **fields,
        },
    )


def log_rule_violations(request_id: str, rule_set: str, errors: List[str]) -> None:
    """Log a deduction or filing rule set that reported violations"""
    logging.info(
        f"{rule_set} rules reported {len(errors)} violation(s)",
        extra={
            "request_id": request_id,
            "step": f"{rule_set}_validation",
            "rule_set": rule_set,
            "violations": errors,
        },
    )
