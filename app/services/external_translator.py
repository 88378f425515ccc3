"""
Google Translate client used when the Banjara dictionary has no match.

Banjara has no language code in public translation APIs, so callers pass the
closest supported language as the source hint.
"""

import logging
from typing import Optional

import httpx

from app.config.settings import TranslatorSettings
from app.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "google-translate"


class GoogleTranslateClient:
    """
    Async client for Google Translate.

    Uses the Cloud Translation v2 API when an API key is configured and the
    public ``translate_a/single`` endpoint otherwise. Every failure surfaces
    as ``ExternalServiceError``; degrading to placeholder text is the
    caller's decision.
    """

    def __init__(
        self,
        settings: TranslatorSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.timeout = settings.timeout_seconds
        self._transport = transport

        if settings.api_key:
            logger.info("Google Translate configured with API key")
        else:
            logger.info("Google Translate API key not set, using public endpoint")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """
        Translate ``text`` and return the translated string.

        Raises:
            ExternalServiceError: On timeout, transport error, non-2xx status
                or an unexpected response body
        """
        try:
            async with self._client() as client:
                if self.settings.api_key:
                    response = await client.post(
                        self.settings.api_url,
                        params={"key": self.settings.api_key},
                        json={
                            "q": text,
                            "source": source_language,
                            "target": target_language,
                            "format": "text",
                        },
                    )
                else:
                    response = await client.get(
                        self.settings.public_api_url,
                        params={
                            "client": "gtx",
                            "sl": source_language,
                            "tl": target_language,
                            "dt": "t",
                            "q": text,
                        },
                    )
                response.raise_for_status()
                payload = response.json()
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
        except ValueError as e:
            raise ExternalServiceError(SERVICE_NAME, "invalid JSON response") from e

        translated = self._extract(payload)
        if not translated:
            raise ExternalServiceError(SERVICE_NAME, "empty translation")
        return translated

    def _extract(self, payload) -> str:
        try:
            if self.settings.api_key:
                return payload["data"]["translations"][0]["translatedText"].strip()
            # [[["translated", "original", ...], ...], ...]
            return "".join(segment[0] for segment in payload[0] if segment and segment[0]).strip()
        except (KeyError, IndexError, TypeError) as e:
            raise ExternalServiceError(SERVICE_NAME, "unexpected response shape") from e
