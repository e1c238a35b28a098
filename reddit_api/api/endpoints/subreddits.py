"""
Subreddit API endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from reddit_api.api.dependencies import get_store, read_json_body
from reddit_api.core.document_store import DocumentStore, DuplicateKeyError
from reddit_api.core.errors import Conflict, InternalError, RedditApiError
from reddit_api.core.validation import validate_payload
from reddit_api.models.dtos import SubredditCreate, SubredditCreatedResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=SubredditCreatedResponse)
async def create_subreddit(
    payload: Any = Depends(read_json_body),
    store: DocumentStore = Depends(get_store),
) -> SubredditCreatedResponse:
    """
    Create a new subreddit.

    The payload is validated before the store is touched; a subreddit whose
    name is already taken is rejected with 409.

    Raises:
        ValidationError: Missing, empty or unknown fields.
        Conflict: A subreddit with the same name exists.
        InternalError: Any store failure.
    """
    try:
        subreddit = validate_payload(SubredditCreate, payload)
        subreddits = store.collection("subreddits")

        if await subreddits.find_one(name=subreddit.name):
            raise Conflict("Subreddit already exists")

        try:
            result = await subreddits.insert_one({
                "name": subreddit.name,
                "description": subreddit.description,
                "created_at": datetime.now(timezone.utc),
            })
        except DuplicateKeyError:
            # Lost a race against a concurrent create with the same name
            raise Conflict("Subreddit already exists")

        logger.info(f"Created subreddit '{subreddit.name}' ({result.inserted_id})")
        return SubredditCreatedResponse(
            message="Subreddit created successfully",
            subreddit_id=result.inserted_id,
        )

    except RedditApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating subreddit: {str(e)}", exc_info=True)
        raise InternalError()
