"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from rentatool.config import settings
from rentatool.domain.models import RentalAgreement


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


def log_checkout(
    request_id: str,
    agreement: RentalAgreement,
    duration_ms: float,
) -> None:
    """Log structured checkout outcome for analysis"""
    logging.info(
        "Checkout completed",
        extra={
            "request_id": request_id,
            "step": "checkout_complete",
            "tool_code": agreement.code,
            "rental_days": agreement.rental_days,
            "charge_days": agreement.total_chargeable_days,
            "discount_percent": agreement.discount_percent,
            "final_charge": str(agreement.final_charge),
            "duration_ms": duration_ms,
        },
    )
