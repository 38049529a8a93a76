"""Postmark transactional email client."""

from models import EmailPayload
from shared.config import Settings
from shared.http import post_json


class EmailClient:
    """Posts a single email to the Postmark-compatible endpoint."""

    def __init__(self, settings: Settings):
        self.endpoint = settings.postmark_api_endpoint
        self.token = settings.postmark_api_token
        self.timeout = settings.request_timeout

    def send_email(self, payload: EmailPayload) -> str | None:
        """
        Send an email.

        Returns:
            The provider's MessageID when the response carries one

        Raises:
            ProviderError: transport failure or any non-2xx response
        """
        response = post_json(
            "send_digest_email",
            self.endpoint,
            payload.model_dump(by_alias=True),
            self.timeout,
            headers={"X-Postmark-Server-Token": self.token},
        )

        try:
            body = response.json()
        except ValueError:
            return None
        return body.get("MessageID") if isinstance(body, dict) else None
