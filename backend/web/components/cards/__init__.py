"""
Card components for the portal.

Reusable list entries for notifications and directory accounts.
"""

from .notification import NotificationCard
from .identity import IdentityRow

__all__ = ["NotificationCard", "IdentityRow"]
