"""Deal logging module."""

from .deal_logger import DealLogConfig, DealLogger
from .formatters import format_card, format_cards

__all__ = [
    "DealLogConfig",
    "DealLogger",
    "format_card",
    "format_cards",
]
