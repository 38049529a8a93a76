"""
Notification system for the campsite opening notifier.

This module handles:
- Building per-subscriber digests from the availability index
- Sending digest emails via Postmark
- Dispatching digests to all subscribers with partial-failure tolerance
"""

from .email_sender import build_digest, send_digest_email
from .dispatcher import dispatch_digests

__all__ = [
    'build_digest',
    'send_digest_email',
    'dispatch_digests',
]
