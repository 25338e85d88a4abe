"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable
from pythonjsonlogger import jsonlogger

from spendwise.config import settings


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


def log_score(request_id: str, user_id: str, score: int, band: str, expense_count: int) -> None:
    """Log a Smart Spend Score computation"""
    logging.info(
        "Score computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "score_computed",
            "score": score,
            "score_band": band,
            "expense_count": expense_count,
        },
    )


def log_badges_awarded(request_id: str, user_id: str, badge_types: Iterable[str], source: str) -> None:
    """Log newly awarded badges for analysis"""
    badge_types = list(badge_types)
    if not badge_types:
        return
    logging.info(
        "Badges awarded",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "badges_awarded",
            "source": source,  # activity | comparison
            "badge_types": badge_types,
        },
    )
