"""Prompt templating helpers."""
from __future__ import annotations

SUMMARIZE_TEMPLATE = (
    "Summarize the following text in 3–5 bullet points. Be concise and clear.\n\n"
    "{{text}}"
)

KEYWORDS_TEMPLATE = (
    "Extract 5–10 key keywords from the text below.\n"
    'Return ONLY a JSON array of strings. Example: ["keyword1","keyword2"].\n\n'
    "Text:\n"
    "{{text}}"
)

REWRITE_TEMPLATE = (
    "Rewrite the following text in a {{tone}} tone. Preserve the original meaning. "
    "Respond with ONLY the rewritten text.\n\n"
    "{{text}}"
)

QUESTIONS_TEMPLATE = (
    "From the text below, generate 5–10 clear, helpful questions.\n"
    'Return ONLY a JSON array of strings. Example: ["Question 1?", "Question 2?"].\n\n'
    "Text:\n"
    "{{text}}"
)

TITLES_TEMPLATE = (
    "Generate 5 concise, engaging title ideas for the text below.\n"
    'Return ONLY a JSON array of strings. Example: ["Title 1", "Title 2"].\n\n'
    "Text:\n"
    "{{text}}"
)

EXPAND_TEMPLATE = (
    "Expand and elaborate on the following text.\n"
    "Add helpful explanations and details but keep it clear and readable.\n"
    "Respond with ONLY the expanded text.\n\n"
    "Text:\n"
    "{{text}}"
)

def render_prompt(template: str, **values: str) -> str:
    """
    Render values into the template.

    Placeholders look like {{name}}. The template is scanned once, so
    placeholder-like sequences inside substituted values are left alone.

    Args:
        template: Template content.
        values: Replacement for each placeholder name.

    Returns:
        Rendered prompt.
    """
    parts: list[str] = []
    rest = template
    while True:
        start = rest.find("{{")
        end = rest.find("}}", start + 2) if start != -1 else -1
        if start == -1 or end == -1:
            parts.append(rest)
            break
        name = rest[start + 2:end]
        if name in values:
            parts.append(rest[:start])
            parts.append(values[name])
        else:
            parts.append(rest[:end + 2])
        rest = rest[end + 2:]
    return "".join(parts)
