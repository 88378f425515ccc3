"""
Telugu text-to-speech proxy.

Browsers rarely ship a Telugu voice, so the client asks the server for an MP3
rendered by Google Translate TTS and plays it directly.
"""

import logging
from typing import Optional

import httpx

from app.config.settings import SpeechSettings
from app.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "google-tts"


class SpeechProxy:
    """Fetches synthesized speech audio for a short text."""

    def __init__(
        self,
        settings: SpeechSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._transport = transport

    async def synthesize(self, text: str, language: str = "te") -> bytes:
        """
        Return MP3 bytes for ``text``; text longer than the configured limit
        is truncated.

        Raises:
            ExternalServiceError: If the TTS service fails or times out
        """
        text = text[: self.settings.max_text_length]
        params = {
            "ie": "UTF-8",
            "q": text,
            "tl": language,
            "client": "tw-ob",
        }
        headers = {"User-Agent": "Mozilla/5.0", "Referer": "https://translate.google.com/"}

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(self.settings.api_url, params=params, headers=headers)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ExternalServiceError(SERVICE_NAME, "timeout") from e
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                SERVICE_NAME,
                f"HTTP {e.response.status_code}",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(SERVICE_NAME, f"transport error: {e}") from e

        if not response.content:
            raise ExternalServiceError(SERVICE_NAME, "empty audio")

        logger.debug(f"Synthesized {len(response.content)} bytes of '{language}' speech")
        return response.content
