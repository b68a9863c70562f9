"""Utility functions for the LlamaFarm bridge."""

from llamafarm_bridge.utils.logging_setup import setup_logging

__all__ = ["setup_logging"]
