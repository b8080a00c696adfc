import re
from langchain_core.messages import AIMessage

# opening fence with an optional language tag, then any bare closing fence
_OPEN_FENCE_RE = re.compile(r"```[a-zA-Z0-9+\-]*\n?")
_CLOSE_FENCE_RE = re.compile(r"```")


def normalize(raw: str | AIMessage) -> str:
    """Strip every markdown fence marker and trim the result.

    Not limited to the string boundaries: all markers go, even when the
    model answered with several blocks.
    """
    if hasattr(raw, "content"):
        raw = raw.content
    text = _OPEN_FENCE_RE.sub("", raw)
    return _CLOSE_FENCE_RE.sub("", text).strip()
