"""
Client for the Google Cloud Translation REST API (v2).

Credentials come from one of:
    GOOGLE_TRANSLATE_API_KEY       sent as the "key" parameter
    GOOGLE_TRANSLATE_ACCESS_TOKEN  sent as an "Authorization: Bearer" header

The API key is used when both are set. Set GOOGLE_TRANSLATE_API_URL to point
the client at a different endpoint.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import requests

from gtrans.errors import APIError, ConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://translation.googleapis.com/language/translate/v2"


class GoogleTranslateClient:
    def __init__(
        self,
        api_key: str | None = None,
        access_token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key and not access_token:
            raise ConfigError(
                "neither GOOGLE_TRANSLATE_API_KEY nor GOOGLE_TRANSLATE_ACCESS_TOKEN is set"
            )

        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.params: dict[str, str] = {}
        if api_key:
            self.params["key"] = api_key
        else:
            self.session.headers["Authorization"] = f"Bearer {access_token}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GoogleTranslateClient:
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("GOOGLE_TRANSLATE_API_KEY"),
            access_token=env.get("GOOGLE_TRANSLATE_ACCESS_TOKEN"),
            api_url=env.get("GOOGLE_TRANSLATE_API_URL") or DEFAULT_API_URL,
        )

    def _post(self, url: str, payload: dict[str, Any], what: str) -> dict[str, Any]:
        try:
            response = self.session.post(url, params=self.params, data=payload)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise APIError(f"fail to call {what} API: {exc}") from exc

        body = data.get("data") if isinstance(data, dict) else None
        if not isinstance(body, dict):
            raise APIError(f"fail to call {what} API: unexpected response {data!r}")
        return body

    def detect(self, text: str) -> str:
        """Return the language code Google detects for text."""
        body = self._post(f"{self.api_url}/detect", {"q": text}, "detection")
        try:
            language = body["detections"][0][0]["language"]
        except (KeyError, IndexError, TypeError) as exc:
            raise APIError("fail to call detection API: no detections returned") from exc

        logger.debug("Detected source language %r", language)
        return language

    def translate(self, text: str, target: str) -> str:
        """Translate text into target, as plain text."""
        payload = {"q": text, "target": target, "format": "text"}
        body = self._post(self.api_url, payload, "translate")
        try:
            translated = body["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError) as exc:
            raise APIError("fail to call translate API: no translations returned") from exc

        logger.debug("Translated %d characters into %r", len(text), target)
        return translated
