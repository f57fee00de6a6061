"""
Push Queue Providers

Adapters that translate provider webhooks into internal notifications.
"""

from .base import AdapterResult, BaseAdapter, InboundRequest
from .ironmq import IronMqAdapter
from .resolver import resolve_queue_name
from .sns import SnsAdapter

__all__ = [
    "AdapterResult",
    "BaseAdapter",
    "InboundRequest",
    "IronMqAdapter",
    "SnsAdapter",
    "resolve_queue_name",
]
