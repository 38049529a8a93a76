"""
Email sending via the Postmark API for the notifier.

Builds digest emails listing the months with campsite openings at a
subscriber's facility.
"""

from datetime import datetime
from typing import Any, Dict, List
from urllib.parse import quote

from clients import EmailClient
from models import EmailDigest, EmailPayload, MonthWindow, Subscription
from models.types import AvailabilityIndex
from shared.config import Settings
from shared.errors import ProviderError

SUBJECT = "Your spot opened up!"
MESSAGE_STREAM = "outbound"


def build_digest(
    subscription: Subscription, index: AvailabilityIndex, window: MonthWindow
) -> EmailDigest | None:
    """
    Digest for one subscription, or None when its facility has no openings.

    Facilities that did not resolve or had no open months are absent from
    the index, so both cases return None.
    """
    months = index.get(subscription.facility_id)
    if not months:
        return None

    return EmailDigest(
        to=subscription.email,
        facility_id=subscription.facility_id,
        months=window.order(months),
    )


def _prepare_month_data(months: List[str]) -> List[Dict[str, str]]:
    """
    Pair each month code with its display name.

    Args:
        months: Two-digit month codes in window order

    Returns:
        List of dicts with 'code' and 'name'
    """
    prepared = []
    for code in months:
        name = datetime(2000, int(code), 1).strftime('%B')
        prepared.append({'code': code, 'name': name})
    return prepared


def send_digest_email(
    digest: EmailDigest,
    settings: Settings,
    client: EmailClient | None = None,
) -> Dict[str, Any]:
    """
    Send one digest email.

    Args:
        digest: Recipient, facility and open months
        settings: Run configuration (reservation link, sender, Postmark access)
        client: Email client; built from settings when omitted

    Returns:
        Dictionary with 'success' (bool), 'email_id' (str if success), 'error' (str if failed)
    """
    if client is None:
        client = EmailClient(settings)

    reservation_link = f"{settings.reservation_url}/{quote(digest.facility_id, safe='')}"
    prepared_months = _prepare_month_data(digest.months)

    payload = EmailPayload(
        from_email=settings.from_email,
        to=digest.to,
        subject=SUBJECT,
        text_body=_build_digest_text(prepared_months, reservation_link),
        html_body=_build_digest_html(prepared_months, reservation_link),
        message_stream=MESSAGE_STREAM,
    )

    try:
        email_id = client.send_email(payload)
    except ProviderError as e:
        return {
            'success': False,
            'error': str(e)
        }

    return {
        'success': True,
        'email_id': email_id
    }


def _build_digest_html(prepared_months: List[Dict[str, str]], reservation_link: str) -> str:
    """
    Build HTML email body for an openings digest.

    Args:
        prepared_months: Month dicts from _prepare_month_data
        reservation_link: URL of the facility's reservation page

    Returns:
        HTML string
    """
    html = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Your spot opened up!</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 600px;
            margin: 0 auto;
            padding: 20px;
        }
        .month {
            display: inline-block;
            background-color: #dcfce7;
            color: #166534;
            padding: 4px 10px;
            border-radius: 12px;
            margin: 0 6px 6px 0;
            font-weight: 500;
        }
        .reserve {
            display: inline-block;
            margin-top: 12px;
            color: #2563eb;
            font-weight: 600;
        }
    </style>
</head>
<body>
    <h1>Your spot opened up!</h1>
    <p>New openings for following months:</p>
    <div class="months">
"""

    for month in prepared_months:
        html += f"""
        <span class="month">{month['name']} ({month['code']})</span>
"""

    html += f"""
    </div>
    <a href="{reservation_link}" class="reserve">Be first to reserve the spot here</a>
    <p style="margin-top: 20px; color: #9ca3af; font-size: 12px;">{reservation_link}</p>
</body>
</html>
"""

    return html


def _build_digest_text(prepared_months: List[Dict[str, str]], reservation_link: str) -> str:
    """Build plain text email body for an openings digest."""
    months_text = ", ".join(f"{m['name']} ({m['code']})" for m in prepared_months)
    return (
        f"New openings for following months: {months_text}.\n"
        f"Be first to reserve the spot here: {reservation_link}\n"
    )
