# Event Hub package

from .config import VERSION as __version__
from .errors import EventHubError, InvalidCapacityError, InvalidPatternError
from .hub import EventHub
from .logsink import LogSink
from .models import PatternEntry, Subscription, SubscriptionInfo

__all__ = [
    "__version__",
    "EventHub",
    "LogSink",
    "Subscription",
    "SubscriptionInfo",
    "PatternEntry",
    "EventHubError",
    "InvalidPatternError",
    "InvalidCapacityError",
]
