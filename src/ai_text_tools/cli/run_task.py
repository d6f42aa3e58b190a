"""Run a single text task against the completion API from the command line."""
from __future__ import annotations
import argparse
import json
import logging
import sys

from ai_text_tools.common.config import ConfigError, load_settings
from ai_text_tools.common.llm_client import ChatCompletionClient, LLMError
from ai_text_tools.common.logging_setup import setup_logging
from ai_text_tools.common.tasks import TASKS, run_task

LOGGER = logging.getLogger("ai_text_tools.cli")

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize, rewrite or mine text with an LLM")
    ap.add_argument("--task", required=True, choices=sorted(TASKS), help="Task to run")
    ap.add_argument("--text", default=None, help="Input text; read from stdin when omitted")
    ap.add_argument("--tone", default=None, help="Tone for the rewrite task")
    ap.add_argument("--config", default=None, help="Optional YAML config path")
    args = ap.parse_args(argv)

    # stdout carries the result
    setup_logging(logging.WARNING, stream=sys.stderr)
    text = args.text if args.text is not None else sys.stdin.read().strip()
    if not text:
        LOGGER.error("`text` is required")
        return 2

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        LOGGER.error("%s", e)
        return 1

    client = ChatCompletionClient(settings)
    try:
        result = run_task(client, args.task, text, args.tone)
    except LLMError as e:
        LOGGER.error("%s error: %s", args.task, e)
        return 1
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
