"""Shared FastAPI dependencies."""

import json
from typing import Any

from fastapi import Request

from reddit_api.core.document_store import DocumentStore
from reddit_api.core.errors import ValidationError


def get_store(request: Request) -> DocumentStore:
    """Return the store client created at application startup."""
    return request.app.state.store


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    An empty body is treated as an empty object. Unparseable bodies are
    rejected before any handler logic runs.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError([{
            "message": f"Malformed JSON body: {e}",
            "path": [],
            "type": "object.base",
            "context": {"label": "value"},
        }])
