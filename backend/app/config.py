"""
Configuration for the code reviewer backend.

Values come from the environment; a .env file at the project root is
loaded first if present.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o",
}


def default_model(provider: str) -> str:
    return DEFAULT_MODELS.get(provider, DEFAULT_MODELS["gemini"])


class Config:
    """Typed access to backend settings."""

    # LLM backend
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini")
    MODEL_NAME = os.getenv("MODEL_NAME") or default_model(LLM_PROVIDER)
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    TEMPERATURE = float(os.getenv("TEMPERATURE", "0.2"))

    # HTTP server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    @classmethod
    def api_key(cls) -> str:
        """Credential for the selected provider. Not validated here."""
        if cls.LLM_PROVIDER == "openai":
            return cls.OPENAI_API_KEY
        return cls.GEMINI_API_KEY
