# present_ai/llm.py

import logging
from functools import lru_cache
from typing import Optional

from google import genai
from openai import OpenAI

from . import config

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when the text-generation call fails for any reason."""


@lru_cache(maxsize=None)
def _openai_client(api_key: str) -> OpenAI:
    return OpenAI(api_key=api_key)


@lru_cache(maxsize=None)
def _gemini_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def _require_key(name: str) -> str:
    key = config.api_key(name)
    if not key:
        raise GenerationError(
            f"{name} not set. Add it to .streamlit/secrets.toml "
            "or set it as an environment variable."
        )
    return key


def _openai_text(prompt: str, model: str) -> str:
    client = _openai_client(_require_key("OPENAI_API_KEY"))
    resp = client.responses.create(
        model=model,
        input=[{"role": "user", "content": prompt}],
    )
    return resp.output_text or ""


def _gemini_text(prompt: str, model: str) -> str:
    client = _gemini_client(_require_key("GEMINI_API_KEY"))
    resp = client.models.generate_content(model=model, contents=prompt)
    return resp.text or ""


_PROVIDERS = {
    "openai": (_openai_text, lambda: config.OPENAI_MODEL),
    "gemini": (_gemini_text, lambda: config.GEMINI_MODEL),
}


def generate_text(prompt: str, model: Optional[str] = None, provider: Optional[str] = None) -> str:
    """Sends one prompt to the configured provider and returns the raw reply text."""
    provider = (provider or config.LLM_PROVIDER).lower()
    if provider not in _PROVIDERS:
        raise GenerationError(f"Unknown LLM provider: {provider!r}")

    call, default_model = _PROVIDERS[provider]
    model = model or default_model()
    logger.info("Requesting gift ideas from %s (%s)", provider, model)

    try:
        text = call(prompt, model)
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(f"{provider} generation failed: {e}") from e

    return text.strip()
