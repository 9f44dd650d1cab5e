"""Runtime storage for state machine transitions."""

from .graph import StateGraph

__all__ = ["StateGraph"]
