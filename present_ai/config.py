import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _secret(name: str) -> Optional[str]:
    # Streamlit secrets win over env vars when a secrets.toml is present
    import streamlit as st

    try:
        value = st.secrets.get(name)
    except FileNotFoundError:
        return None
    return value.strip() if isinstance(value, str) else None


def api_key(name: str) -> str:
    return _secret(name) or os.getenv(name, "").strip()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").strip().lower()

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini").strip()
# gemini-1.5-pro is retired
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash").strip()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

GIFT_IDEAS_PER_REQUEST = _int_env("GIFT_IDEAS_PER_REQUEST", 5)

OTHERS = "Others"

GENDERS = ["Male", "Female", "Non-binary", "Prefer not to say"]
RELATIONSHIPS = ["Friend", "Sibling", "Parent", "Partner", "Colleague", OTHERS]
PERSONALITIES = ["Cheerful", "Introverted", "Adventurous", "Creative", OTHERS]
OCCASIONS = ["Birthday", "Anniversary", "Christmas", "Graduation", OTHERS]

CURRENCIES = {
    "USD": "USD ($)",
    "EUR": "EUR (€)",
    "GBP": "GBP (£)",
    "INR": "INR (₹)",
}
DEFAULT_CURRENCY = "USD"

GENERATION_FAILED_MESSAGE = "Failed to generate gift ideas. Please try again."
