"""
ActionGate component - serializes mutating user actions.

A second attempt while the gate is held is rejected, never queued.
"""

from ._impl import ActionGate

__all__ = ["ActionGate"]
