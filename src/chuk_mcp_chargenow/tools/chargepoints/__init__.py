"""Charge point availability tools."""

from .api import register_chargepoint_tools

__all__ = ["register_chargepoint_tools"]
