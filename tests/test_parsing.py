from __future__ import annotations

from ai_text_tools.common.parsing import Fallback, Parsed, parse_string_list
from ai_text_tools.common.tasks import TASKS, run_task


def test_json_array_is_parsed() -> None:
    outcome = parse_string_list('["a", "b", "c"]')
    assert outcome == Parsed(["a", "b", "c"])
    assert outcome.items == ["a", "b", "c"]


def test_empty_array_is_parsed() -> None:
    assert parse_string_list("[]") == Parsed([])


def test_plain_text_falls_back() -> None:
    outcome = parse_string_list("one two three")
    assert outcome == Fallback("one two three")
    assert outcome.items == ["one two three"]


def test_non_string_elements_fall_back() -> None:
    assert isinstance(parse_string_list('["a", 2]'), Fallback)


def test_non_array_json_falls_back() -> None:
    for raw in ('{"keywords": ["a"]}', '"just a string"', "null", "42"):
        assert parse_string_list(raw) == Fallback(raw)


def test_fenced_json_falls_back_verbatim() -> None:
    raw = '```json\n["a"]\n```'
    assert parse_string_list(raw).items == [raw]


class _EchoLLM:
    def __init__(self, reply: str) -> None:
        self.reply = reply

    def complete(self, prompt: str) -> str:
        return self.reply


def test_run_task_shapes_by_task_kind() -> None:
    assert run_task(_EchoLLM('["x"]'), "titles", "t") == {"titles": ["x"]}
    assert run_task(_EchoLLM('["x"]'), "summarize", "t") == {"summary": '["x"]'}
    assert run_task(_EchoLLM("fine"), "questions", "t") == {"questions": ["fine"]}


def test_task_fields() -> None:
    assert {n: t.field for n, t in TASKS.items()} == {
        "summarize": "summary",
        "keywords": "keywords",
        "rewrite": "text",
        "questions": "questions",
        "titles": "titles",
        "expand": "text",
    }


def test_deeply_nested_reply_falls_back() -> None:
    raw = "[" * 100000
    assert parse_string_list(raw) == Fallback(raw)
