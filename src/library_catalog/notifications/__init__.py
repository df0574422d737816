"""
In-process publish/subscribe for catalog change events
"""

from .channel import NotificationChannel, Subscriber
from .events import BookEvent

__all__ = ["BookEvent", "NotificationChannel", "Subscriber"]
