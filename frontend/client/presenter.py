from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from client.view_state import Error, Loading, Operation, Showing, ViewState

PLACEHOLDER = "Run an analysis to see the results here."
WORKING = "Working on it..."

# selector names the highlighter spells differently
_SYNTAX_ALIASES = {"c++": "cpp"}

_TITLES = {
    Operation.REVIEW: "Analysis Results",
    Operation.FIX: "Corrected Code",
    Operation.COMPLEXITY: "Complexity Analysis",
    Operation.DOCUMENT: "Generated Documentation",
}


@dataclass(frozen=True)
class Panel:
    kind: str                       # placeholder | working | error | markdown | code
    title: str
    body: str
    language: Optional[str] = None

    @property
    def copyable(self) -> bool:
        return self.kind in ("markdown", "code")


def panel_title(operation: Optional[Operation], target_language: Optional[str] = None) -> str:
    if operation is Operation.CONVERT:
        return f"Converted Code ({target_language})"
    return _TITLES.get(operation, "Analysis Results")


def syntax_hint(language: Optional[str]) -> Optional[str]:
    if not language:
        return None
    language = language.lower()
    return _SYNTAX_ALIASES.get(language, language)


def render(state: ViewState) -> Panel:
    if isinstance(state, Loading):
        return Panel("working", panel_title(state.operation), WORKING)
    if isinstance(state, Error):
        return Panel("error", panel_title(None), state.message)
    if isinstance(state, Showing):
        result = state.result
        if result.operation.returns_code:
            target = result.language if result.operation is Operation.CONVERT else None
            language = syntax_hint(result.language)
            return Panel("code", panel_title(result.operation, target), result.text, language)
        return Panel("markdown", panel_title(result.operation), result.text)
    return Panel("placeholder", panel_title(None), PLACEHOLDER)


def copy_text(state: ViewState) -> Optional[str]:
    """Text the copy action would put on the clipboard, None when disabled."""
    if isinstance(state, Showing) and state.result.text:
        return state.result.text
    return None
