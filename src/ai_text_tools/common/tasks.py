"""Registry of the text tasks and the shared prompt/shape pipeline."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from ai_text_tools.common import templates
from ai_text_tools.common.parsing import parse_string_list
from ai_text_tools.common.schema import DEFAULT_TONE


class Completer(Protocol):
    def complete(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class Task:
    name: str
    template: str
    field: str
    returns_list: bool = False


TASKS: dict[str, Task] = {
    t.name: t
    for t in (
        Task("summarize", templates.SUMMARIZE_TEMPLATE, "summary"),
        Task("keywords", templates.KEYWORDS_TEMPLATE, "keywords", returns_list=True),
        Task("rewrite", templates.REWRITE_TEMPLATE, "text"),
        Task("questions", templates.QUESTIONS_TEMPLATE, "questions", returns_list=True),
        Task("titles", templates.TITLES_TEMPLATE, "titles", returns_list=True),
        Task("expand", templates.EXPAND_TEMPLATE, "text"),
    )
}


def build_prompt(task: Task, text: str, tone: str | None = None) -> str:
    return templates.render_prompt(task.template, tone=tone or DEFAULT_TONE, text=text)


def shape_reply(task: Task, reply: str) -> str | list[str]:
    """Plain-text tasks pass the reply through; list tasks parse it."""
    if task.returns_list:
        return parse_string_list(reply).items
    return reply


def run_task(client: Completer, name: str, text: str, tone: str | None = None) -> dict[str, str | list[str]]:
    """
    Prompt the model for one task and return the response body as a dict.

    Errors from the client propagate unchanged.
    """
    task = TASKS[name]
    reply = client.complete(build_prompt(task, text, tone))
    return {task.field: shape_reply(task, reply)}
