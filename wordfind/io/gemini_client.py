"""Small HTTP client for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(RuntimeError):
    """Raised when the Gemini API request fails or returns no text."""


class GeminiClient:
    """Sends one prompt, returns the first text candidate."""

    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 30.0,
        temperature: float = 0.7,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.api_key_env = api_key_env
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self.session = session or requests.Session()
        self._api_key = os.environ.get(api_key_env)
        if not self._api_key:
            raise GeminiAPIError(
                f"Missing Gemini API key in environment variable {self.api_key_env}"
            )

    def generate_text(self, prompt: str, *, json_output: bool = False) -> str:
        url = f"{self.API_BASE}/models/{self.model_name}:generateContent"
        generation_config: Dict[str, Any] = {"temperature": self.temperature}
        if json_output:
            generation_config["responseMimeType"] = "application/json"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        LOGGER.debug("Requesting %s (json=%s)", self.model_name, json_output)
        try:
            response = self.session.post(
                url,
                params={"key": self._api_key},
                json=payload,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise GeminiAPIError(f"Gemini returned a non-JSON body: {exc}") from exc

        text = self._extract_text(data)
        if not text:
            LOGGER.warning("Gemini response missing candidates: %s", data)
            raise GeminiAPIError("Gemini API response missing text candidates")
        return text

    @staticmethod
    def _extract_text(payload: Dict[str, Any]) -> Optional[str]:
        candidates: List[Dict[str, Any]] = payload.get("candidates") or []
        for candidate in candidates:
            parts: List[Dict[str, Any]] = (candidate.get("content") or {}).get("parts") or []
            texts = [part["text"] for part in parts if part.get("text")]
            if texts:
                return "".join(texts)
        return None
