"""
Ordering component - moves a link one place up or down.
"""

from ._impl import OrderReconciler

__all__ = ["OrderReconciler"]
