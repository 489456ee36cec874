"""WhatsApp webhook handler — receives messages and replies in the background."""

from __future__ import annotations

import logging
from datetime import timedelta

from fastapi import APIRouter, BackgroundTasks, Query, Request, Response

from pizza_bot.config import settings
from pizza_bot.services import messages
from pizza_bot.services.message_router import MessageRouter
from pizza_bot.services.session_manager import SessionManager
from pizza_bot.services.whatsapp_client import WhatsAppClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])

# ── Shared instances (created once, reused across requests) ──
session_manager = SessionManager(
    max_age=timedelta(seconds=settings.session_max_age_seconds)
)
whatsapp_client = WhatsAppClient()
_message_router = MessageRouter(session_manager)


# ──────────────────────────────────────────────────────────────
# GET /webhook — Meta verification challenge
# ──────────────────────────────────────────────────────────────
@router.get("/webhook")
async def verify_webhook(
    hub_mode: str = Query(None, alias="hub.mode"),
    hub_verify_token: str = Query(None, alias="hub.verify_token"),
    hub_challenge: str = Query(None, alias="hub.challenge"),
) -> Response:
    """Respond to the Meta webhook verification challenge."""
    if not (hub_mode and hub_verify_token):
        return Response(content="Webhook is running", media_type="text/plain")

    if hub_mode == "subscribe" and hub_verify_token == settings.whatsapp_verify_token:
        logger.info("Webhook verified successfully")
        return Response(content=hub_challenge, media_type="text/plain")
    logger.warning("Webhook verification failed (bad token or mode)")
    return Response(content="Forbidden", status_code=403)


# ──────────────────────────────────────────────────────────────
# POST /webhook — Incoming messages
# ──────────────────────────────────────────────────────────────
@router.post("/webhook")
async def receive_message(request: Request, background_tasks: BackgroundTasks) -> dict:
    """Accept an incoming WhatsApp message via the Meta Cloud API.

    The webhook is acknowledged immediately; each message is processed and
    answered in a background task.  Expected payload structure
    (simplified)::

        {
          "entry": [{
            "changes": [{
              "value": {
                "messages": [{
                  "from": "+15551234567",
                  "text": { "body": "Hello!" }
                }]
              }
            }]
          }]
        }
    """
    body = await request.json()

    # Extract message data from the Meta payload
    try:
        entry = body["entry"][0]
        changes = entry["changes"][0]
        value = changes["value"]
        incoming = value.get("messages", [])
    except (KeyError, IndexError, TypeError, AttributeError):
        logger.debug("Received non-message webhook event, ignoring")
        return {"status": "ok"}

    for msg in incoming:
        sender_phone = msg.get("from", "")
        text_body = msg.get("text", {}).get("body", "")

        if not sender_phone:
            logger.error("Missing phone number in message, skipping")
            continue

        logger.info("Message from %s: %s", sender_phone, text_body[:80])
        background_tasks.add_task(process_message, sender_phone, text_body)

    return {"status": "ok"}


# ──────────────────────────────────────────────────────────────
# GET /test: manual trigger without WhatsApp
# ──────────────────────────────────────────────────────────────
@router.get("/test")
async def test_message(
    background_tasks: BackgroundTasks,
    user_message: str = Query("", alias="userMessage"),
    user_phone: str = Query(None, alias="userPhone"),
) -> Response:
    """Process *userMessage* as if it had been sent by *userPhone*."""
    if not user_phone:
        return Response(content="Missing phone number", status_code=400)

    logger.info("Test endpoint called: %s from %s", user_message, user_phone)
    background_tasks.add_task(process_message, user_phone, user_message)
    return Response(status_code=200)


# ──────────────────────────────────────────────────────────────
# Background processing
# ──────────────────────────────────────────────────────────────
async def process_message(phone: str, text: str) -> None:
    """Run a message through the conversation and deliver the reply.

    Session state is already updated when delivery happens; a failed send
    is logged and never undoes it.
    """
    try:
        reply = await _message_router.handle_message(phone, text)
        await whatsapp_client.send_message(phone, reply)
    except Exception:
        logger.exception("Message processing error for %s", phone)
        try:
            await whatsapp_client.send_message(phone, messages.ERROR_MESSAGE)
        except Exception:
            logger.exception("Failed to send error message to %s", phone)
