"""Google Gemini provider over the public REST API."""

import json
import logging
from typing import Any, Optional

import requests

from ..config import DEFAULT_MODEL
from ..exceptions import HttpStatusError, MalformedResponse
from ..fetcher import make_session, send
from ..utils import normalize_model_name, preview
from .base import LLMProvider

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GENERATE_METHOD = "generateContent"

_LIST_TIMEOUT = 10.0
_GENERATE_TIMEOUT = 15.0


def _parse_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(payload: Any) -> str:
    """Pull ``error.message`` out of a Gemini error body."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return "Unknown Gemini API error"


def _raise_for_status(response: requests.Response, payload: Any) -> None:
    if response.ok:
        return
    message = _error_message(payload)
    raise HttpStatusError(
        f"Gemini API error {response.status_code} {response.reason}: {message}",
        status_code=response.status_code,
        detail=message,
    )


def _summary_text(payload: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or None."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiProvider(LLMProvider):
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        session: Optional[requests.Session] = None,
        generate_timeout: float = _GENERATE_TIMEOUT,
        list_timeout: float = _LIST_TIMEOUT,
    ):
        self._api_key = api_key
        self._model = normalize_model_name(model) or DEFAULT_MODEL
        self._owns_session = session is None
        self._session = session or make_session()
        self._generate_timeout = generate_timeout
        self._list_timeout = list_timeout

    @property
    def model(self) -> str:
        return self._model

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def generate(self, prompt: str) -> str:
        url = f"{API_BASE}/{self._model}:{GENERATE_METHOD}"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        logger.debug("POST %s (%d prompt chars)", url, len(prompt))

        response = send(
            self._session, "POST", url, self._generate_timeout,
            params={"key": self._api_key}, json=body,
        )
        payload = _parse_json(response)
        _raise_for_status(response, payload)

        text = _summary_text(payload)
        if text is None:
            raw = json.dumps(payload) if payload is not None else response.text
            logger.warning("Gemini response had no text: %s", preview(raw))
            raise MalformedResponse(f"Unexpected Gemini response: {raw}", raw=raw)
        return text

    def list_models(self) -> list[str]:
        """Walk every catalog page and keep models that support generateContent."""
        names = []
        params = {"key": self._api_key}
        while True:
            response = send(
                self._session, "GET", f"{API_BASE}/models", self._list_timeout,
                params=params,
            )
            payload = _parse_json(response)
            _raise_for_status(response, payload)

            models = payload.get("models") if isinstance(payload, dict) else None
            if not isinstance(models, list):
                raw = json.dumps(payload) if payload is not None else response.text
                raise MalformedResponse(
                    "Unexpected response from models endpoint", raw=raw
                )

            for entry in models:
                if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                    continue
                if GENERATE_METHOD in (entry.get("supportedGenerationMethods") or []):
                    names.append(entry["name"])

            token = payload.get("nextPageToken")
            if not token:
                break
            params = {"key": self._api_key, "pageToken": token}

        logger.debug("Found %d generative models", len(names))
        return names
