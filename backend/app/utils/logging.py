"""Structured logging for itinerary generation and edits."""

import logging
from typing import Any

from backend.app.models.itinerary import Itinerary

logger = logging.getLogger(__name__)


class StructuredItineraryLogger:
    """Structured logger for scheduler runs."""

    def log_generation(self, itinerary: Itinerary, num_legs: int, latency_ms: float) -> None:
        """Log a full itinerary generation with structured data."""
        log_data: dict[str, Any] = {
            "legs": num_legs,
            "total_days": itinerary.total_days,
            "total_experiences": itinerary.summary.total_experiences,
            "total_transit_minutes": itinerary.summary.total_transit_time,
            "latency_ms": round(latency_ms, 2),
        }

        if itinerary.advisories:
            log_data["advisories"] = [v.code for v in itinerary.advisories]
            logger.warning(
                f"Itinerary generated with {len(itinerary.advisories)} advisories",
                extra={"structured": log_data},
            )
            return

        logger.info(
            f"Itinerary generated: {itinerary.total_days} days",
            extra={"structured": log_data},
        )

    def log_edit(self, operation: str, outcome: str, error_reason: str | None = None) -> None:
        """Log an interactive edit (reorder/move) with structured data."""
        log_data: dict[str, Any] = {"operation": operation, "outcome": outcome}

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Itinerary edit: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
