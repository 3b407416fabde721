"""
config.py - Seat map configuration v1.0

Runtime switches for the cabin view: which aircraft to show by default,
whether seats are drawn at all, and how selection changes are presented.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import os
import logging

from seatmap.core.constants import SELECTION_TRANSITION_DURATION_S
from seatmap.errors import SeatMapError

__all__ = [
    'SeatMapConfig',
    'DEFAULT_CONFIG',
    'get_config',
    'set_config',
]

logger = logging.getLogger("seatmap.config")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class SeatMapConfig:
    """Cabin view configuration."""

    default_aircraft: str = "A320"

    # Seat layer; when off only the fuselage and amenities are drawn
    render_seats: bool = True

    # Selection presentation
    animate_selection: bool = True
    transition_duration_s: float = SELECTION_TRANSITION_DURATION_S

    # None means every seat is available
    availability_seed: Optional[int] = None

    log_level: str = "INFO"

    def __post_init__(self):
        if self.transition_duration_s < 0:
            raise SeatMapError(
                f"transition_duration_s must be non-negative, got {self.transition_duration_s}",
                recovery_hint="Set SEATMAP_TRANSITION_DURATION to 0 or a positive number of seconds",
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_aircraft": self.default_aircraft,
            "render_seats": self.render_seats,
            "animate_selection": self.animate_selection,
            "transition_duration_s": self.transition_duration_s,
            "availability_seed": self.availability_seed,
            "log_level": self.log_level,
        }

    @classmethod
    def from_env(cls) -> "SeatMapConfig":
        """Create configuration from environment variables."""
        seed = os.getenv("SEATMAP_AVAILABILITY_SEED")

        return cls(
            default_aircraft=os.getenv("SEATMAP_DEFAULT_AIRCRAFT", "A320"),
            render_seats=_env_flag("SEATMAP_RENDER_SEATS", "true"),
            animate_selection=_env_flag("SEATMAP_ANIMATE_SELECTION", "true"),
            transition_duration_s=float(
                os.getenv("SEATMAP_TRANSITION_DURATION", str(SELECTION_TRANSITION_DURATION_S))
            ),
            availability_seed=int(seed) if seed else None,
            log_level=os.getenv("SEATMAP_LOG_LEVEL", "INFO").upper(),
        )


# =============================================================================
# DEFAULT CONFIGURATION
# =============================================================================

DEFAULT_CONFIG = SeatMapConfig.from_env()


def get_config() -> SeatMapConfig:
    """Get the default seat map configuration."""
    return DEFAULT_CONFIG


def set_config(config: SeatMapConfig) -> None:
    """Set the default seat map configuration."""
    global DEFAULT_CONFIG
    DEFAULT_CONFIG = config
    logger.debug(f"Seat map configuration replaced: {config.to_dict()}")
