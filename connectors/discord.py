"""
Discord connector.

Provides:
- register_commands(settings, commands=None) -> bool

A one-shot bulk overwrite of the application's global commands:
    PUT {DISCORD_API_URL}/applications/{app_id}/commands
    Authorization: Bot <token>

Failures are logged and reported as False; they never stop the server.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from app.config import Settings
from service.commands import commands_payload

logger = logging.getLogger("DiscordConnector")


def register_commands(settings: Settings, commands: Optional[List[Dict[str, Any]]] = None) -> bool:
    app_id = settings.DISCORD_APP_ID
    token = settings.DISCORD_BOT_TOKEN
    if not app_id or not token:
        logger.warning("register_commands: missing DISCORD_APP_ID / DISCORD_BOT_TOKEN. Skipping.")
        return False

    url = f"{settings.DISCORD_API_URL.rstrip('/')}/applications/{app_id}/commands"
    headers = {
        "Authorization": f"Bot {token}",
        "Content-Type": "application/json",
    }
    body = commands if commands is not None else commands_payload()

    try:
        resp = requests.put(url, headers=headers, json=body, timeout=settings.HTTP_TIMEOUT)
    except requests.RequestException as exc:
        logger.exception("Failed to register command: %s", exc)
        return False

    if resp.status_code >= 400:
        logger.error("Command error: %s", resp.text[:500])
        return False

    logger.info("Command set!")
    return True


def register_in_background(settings: Settings) -> threading.Thread:
    t = threading.Thread(
        target=register_commands,
        args=(settings,),
        name="register-commands",
        daemon=True,
    )
    t.start()
    return t
