"""
HTTP clients for the external services used by a run.

- Backend API: confirmed subscriptions and the facility directory
- Availability provider: per-campground month availability
- Postmark: transactional email delivery
"""

from .backend_api import BackendClient
from .availability_api import AvailabilityClient
from .email_api import EmailClient

__all__ = [
    "BackendClient",
    "AvailabilityClient",
    "EmailClient",
]
