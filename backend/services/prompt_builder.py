from __future__ import annotations

from enum import Enum
from typing import Optional

from langchain_core.prompts import PromptTemplate

from services.errors import ValidationError


class Operation(str, Enum):
    REVIEW = "review"
    FIX = "fix"
    COMPLEXITY = "complexity"
    DOCUMENT = "document"
    CONVERT = "convert"

    @property
    def returns_code(self) -> bool:
        """fix/convert answer with bare source, the rest with markdown."""
        return self in (Operation.FIX, Operation.CONVERT)


# ── Templates ─────────────────────────────────────────────────────────────────
REVIEW_PROMPT = PromptTemplate.from_template(
    """🧑‍💻 Act as an expert code reviewer.

Analyze the code snippet below and give structured feedback in **markdown**,
using emojis to keep it readable.

Open with:
- 🧠 **Programming Language**
- 🌟 **Code Quality Rating** (out of 10)

Then cover, each under its own heading:

---

### 🐞 1. Bugs or Potential Errors
- Logical, syntactical or runtime issues.
- Edge cases and undefined behavior.

---

### 🐢 2. Performance Issues or Bottlenecks
- Inefficient operations or resource-heavy logic.
- Possible optimizations.

---

### 🎨 3. Best Practices and Code Style
- Naming, modularity, readability, formatting.
- Violations of language-specific idioms or standards.

---

### 🛠️ 4. Suggestions for Improvement and Refactoring
- Cleaner, more maintainable alternatives.
- Useful design patterns, abstractions or simplifications.

---

### 📦 Code Snippet
```
{code}
```

Keep the review actionable and presentation-ready. 🚀
"""
)

FIX_PROMPT = PromptTemplate.from_template(
    """Act as an expert programmer.
Find and fix any bugs or logical errors in the code snippet below.
Respond with ONLY the corrected code in a single markdown code block.
Do not add any explanation, preamble or other text.

```
{code}
```
"""
)

COMPLEXITY_PROMPT = PromptTemplate.from_template(
    """🧠 Act as a computer science expert in algorithm analysis.

Determine the **time and space complexity** of the code snippet below.
Answer in **markdown** with this structure, using emojis for clarity:

---

### 📈 Complexity Analysis

- **⏱️ Time Complexity:** the Big O notation (e.g. O(n), O(n²), O(log n)).
- **🧮 Explanation:** why the code has this time complexity.

- **💾 Space Complexity:** the Big O notation (e.g. O(1), O(n)).
- **📦 Explanation:** what the code keeps in memory and why.

---

### 📦 Code Snippet
```
{code}
```

Keep it concise and suitable for technical documentation. 🚀
"""
)

DOCUMENT_PROMPT = PromptTemplate.from_template(
    """🧑‍💻 Act as a senior software engineer writing technical documentation.

Write **clean, readable documentation** for the code below in **markdown**,
with these sections:

---

### 📝 Code Summary
- One sentence describing what the code is for.

---

### 📥 Parameters
- One bullet per parameter with its inferred **{{type}}** and a short description.
- If there are no parameters, write **"None"**.

---

### ↪️ Returns
- The inferred **{{type}}** of the return value.
- What the return value represents.

---

❗ Do **NOT** repeat the original code in your answer.
❗ Do **NOT** wrap your answer in a markdown code block.

---

### 📦 Code Snippet
```
{code}
```
"""
)

CONVERT_PROMPT = PromptTemplate.from_template(
    """You are a precise code translator. Convert the following {source_language} code to {target_language}.
Respond with ONLY the converted code in a single markdown code block, no explanations and no extra text.

```
{code}
```
"""
)

TEMPLATES = {
    Operation.REVIEW: REVIEW_PROMPT,
    Operation.FIX: FIX_PROMPT,
    Operation.COMPLEXITY: COMPLEXITY_PROMPT,
    Operation.DOCUMENT: DOCUMENT_PROMPT,
    Operation.CONVERT: CONVERT_PROMPT,
}


def build(
    operation: Operation | str,
    code: str,
    source_language: Optional[str] = None,
    target_language: Optional[str] = None,
) -> str:
    """Render the instruction text sent to the model for one operation."""
    try:
        operation = Operation(operation)
    except ValueError:
        raise ValidationError(f"Unknown operation: {operation}") from None

    if operation is Operation.CONVERT:
        if not source_language or not target_language:
            raise ValidationError("Source and target languages are required.")
        return CONVERT_PROMPT.format(
            code=code,
            source_language=source_language,
            target_language=target_language,
        )

    return TEMPLATES[operation].format(code=code)
