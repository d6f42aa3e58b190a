"""
AI Text Tools package.

Provides:
- An outbound chat-completion client for OpenAI-compatible APIs
- A FastAPI server exposing six text-transformation endpoints plus a browser UI
- A command-line runner for the same tasks
"""
