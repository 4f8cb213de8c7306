"""Client library for the PagerDuty REST v2 and Events APIs.

Two independent pieces:
- pagersduty.types: reference/full resource envelopes with a two-phase codec
- pagersduty.events: trigger/acknowledge/resolve submission with typed outcomes

Example:
    >>> from pagersduty.events import TriggerEvent, send
    >>> outcome = send(TriggerEvent(service_key="...", description="disk full"))
"""

__version__ = "0.1.0"
