"""Accumulators used as bound-method callbacks."""
from .price_totaller import PriceTotaller

__all__ = ["PriceTotaller"]
