from __future__ import annotations

import logging
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from services.errors import GatewayError

logger = logging.getLogger(__name__)


def _message_text(msg: Any) -> str:
    content = msg.content if hasattr(msg, "content") else msg
    if isinstance(content, str):
        return content
    # Gemini may answer with a list of parts
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        if parts:
            return "".join(parts)
    raise GatewayError("Model returned a response that could not be read as text.")


class ModelGateway:
    """Text in, text out boundary around the hosted chat model.

    Built once at startup and shared by every request; it holds no
    per-request state. When the chat model could not be built (missing
    API key, unknown provider) the gateway still exists and every call
    fails with the construction error.
    """

    def __init__(self, llm: Optional[BaseChatModel], *, unavailable_reason: str = ""):
        self.llm = llm
        self.unavailable_reason = unavailable_reason
        self._parser = StrOutputParser()

    async def invoke(self, instruction: str) -> str:
        if self.llm is None:
            raise GatewayError(self.unavailable_reason or "Model client is not configured.")

        logger.debug("sending prompt (%d chars) to model", len(instruction))
        try:
            msg = await self.llm.ainvoke(instruction)
        except Exception as exc:
            logger.error("model call failed: %s", exc)
            raise GatewayError(str(exc)) from exc

        text = self._parser.parse(_message_text(msg))
        logger.debug("model answered with %d chars", len(text))
        return text


# ── Construction ──────────────────────────────────────────────────────────────
def build_chat_model(provider: str, model: str, api_key: str, temperature: float) -> BaseChatModel:
    if provider == "gemini":
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=model, google_api_key=api_key or None, temperature=temperature
        )
    if provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(model=model, api_key=api_key or None, temperature=temperature)
    raise ValueError(f"Unknown provider: {provider}")


def build_gateway(provider: str, model: str, api_key: str, temperature: float = 0.2) -> ModelGateway:
    try:
        llm = build_chat_model(provider, model, api_key, temperature)
    except Exception as exc:
        logger.warning("model client unavailable (%s): %s", provider, exc)
        return ModelGateway(None, unavailable_reason=str(exc))
    logger.info("model gateway ready: %s/%s", provider, model)
    return ModelGateway(llm)
