"""WhatsApp Cloud API client — async HTTP wrapper used to deliver replies."""

from __future__ import annotations

import logging

import httpx

from pizza_bot.config import settings

logger = logging.getLogger(__name__)

GRAPH_API_BASE_URL = "https://graph.facebook.com"


class WhatsAppClient:
    """Sends text messages through the WhatsApp Business Cloud API.

    Delivery is best-effort: failures are logged and reported as ``False``,
    never raised, so the caller's session state is unaffected.
    """

    def __init__(
        self,
        api_token: str | None = None,
        phone_number_id: str | None = None,
        base_url: str = GRAPH_API_BASE_URL,
    ) -> None:
        self._api_token = settings.whatsapp_api_token if api_token is None else api_token
        self._phone_number_id = phone_number_id or settings.whatsapp_phone_number_id
        self._base_url = base_url.rstrip("/")

    async def send_message(self, to_phone: str, text: str) -> bool:
        """Send a text reply to *to_phone*.

        Returns ``True`` if the API accepted the message.
        """
        if not self._api_token:
            logger.warning("WHATSAPP_API_TOKEN not set — reply logged only: %s", text)
            return False

        url = (
            f"{self._base_url}/{settings.whatsapp_api_version}/"
            f"{self._phone_number_id}/messages"
        )
        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }
        payload = {
            "messaging_product": "whatsapp",
            "to": to_phone,
            "type": "text",
            "text": {"body": text},
        }

        try:
            async with httpx.AsyncClient() as client:
                resp = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.exception("Reply request error for %s: %s", to_phone, exc)
            return False

        if resp.status_code == 200:
            logger.info("Reply sent to %s", to_phone)
            return True

        logger.error(
            "Failed to send reply to %s: %s %s", to_phone, resp.status_code, resp.text
        )
        return False
