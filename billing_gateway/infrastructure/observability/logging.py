"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from billing_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_payment(
    request_id: str,
    job_id: int,
    client_id: int,
    contractor_id: int,
    amount_cents: int,
    duration_ms: float,
) -> None:
    """Log structured job payment outcome"""
    logging.info(
        "Job payment completed",
        extra={
            "request_id": request_id,
            "step": "payment_complete",
            "job_id": job_id,
            "client_id": client_id,
            "contractor_id": contractor_id,
            "amount_cents": amount_cents,
            "duration_ms": duration_ms,
        },
    )


def log_deposit(
    request_id: str,
    caller_id: int,
    client_id: int,
    amount_cents: int,
    ceiling_cents: int,
    duration_ms: float,
) -> None:
    """Log structured deposit outcome"""
    logging.info(
        "Deposit completed",
        extra={
            "request_id": request_id,
            "step": "deposit_complete",
            "caller_id": caller_id,
            "client_id": client_id,
            "amount_cents": amount_cents,
            "ceiling_cents": ceiling_cents,
            "duration_ms": duration_ms,
        },
    )
