from __future__ import annotations

import logging
from typing import Callable, List, Optional

import requests

from client.errors import TransportError, ValidationError
from client.view_state import (
    Error,
    Idle,
    Loading,
    Operation,
    OperationResult,
    Showing,
    ViewState,
)

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState], None]


class RequestOrchestrator:
    """Sends one operation at a time to the backend and tracks the view state.

    `session` only needs a requests-style ``post(url, json=...)``; listeners
    are called with every new state, in order.
    """

    def __init__(self, base_url: str, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.state: ViewState = Idle()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _set_state(self, state: ViewState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    def submit(
        self,
        operation: Operation | str,
        snippet: str,
        source_language: Optional[str] = None,
        target_language: Optional[str] = None,
    ) -> None:
        operation = Operation(operation)
        try:
            payload = self._payload(operation, snippet, source_language, target_language)
        except ValidationError as exc:
            self._set_state(Error(str(exc)))
            return

        try:
            # replaces any result on screen before the request goes out
            self._set_state(Loading(operation))
            text = self._post(operation, payload)
        except TransportError as exc:
            logger.warning("%s failed: %s", operation.value, exc)
            self._set_state(Error(str(exc)))
            return
        except BaseException:
            # never leave the panel stuck on Loading; listeners may be the cause
            if self.is_loading:
                logger.exception("%s interrupted", operation.value)
                self.state = Error(f"Failed to fetch {operation.value}.")
            raise

        if operation is Operation.FIX:
            language = source_language
        elif operation is Operation.CONVERT:
            language = target_language
        else:
            language = None
        self._set_state(Showing(OperationResult(operation, text, language)))

    @staticmethod
    def _payload(operation, snippet, source_language, target_language) -> dict:
        if not snippet or not snippet.strip():
            raise ValidationError("Please enter some code to analyze.")
        payload = {"code": snippet}
        if operation is Operation.CONVERT:
            if not source_language or not target_language:
                raise ValidationError("Source and target languages are required.")
            payload["sourceLanguage"] = source_language
            payload["targetLanguage"] = target_language
        return payload

    def _post(self, operation: Operation, payload: dict) -> str:
        fallback = f"Failed to fetch {operation.value}."
        url = f"{self.base_url}/{operation.value}"
        try:
            resp = self.session.post(url, json=payload)
        except requests.RequestException as exc:
            raise TransportError(fallback) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 400:
            if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
                raise TransportError(body["error"])
            raise TransportError(fallback)

        if not isinstance(body, dict) or not isinstance(body.get(operation.result_field), str):
            raise TransportError(fallback)
        return body[operation.result_field]
