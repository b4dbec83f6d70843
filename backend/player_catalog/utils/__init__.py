"""Utility functions and helpers."""

from .timestamps import EPOCH, ensure_utc, to_epoch_millis, from_epoch_millis

__all__ = [
    "EPOCH",
    "ensure_utc",
    "to_epoch_millis",
    "from_epoch_millis",
]
