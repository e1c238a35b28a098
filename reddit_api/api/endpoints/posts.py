"""
Post API endpoints, nested under a subreddit addressed by name.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi import APIRouter, Depends

from reddit_api.api.dependencies import get_store, read_json_body
from reddit_api.core.document_store import DocumentStore
from reddit_api.core.errors import InternalError, NotFound, RedditApiError
from reddit_api.core.validation import schema_fields_only, validate_payload
from reddit_api.models.dtos import MessageResponse, PostCreatedResponse, PostDTO, PostWrite

router = APIRouter()
logger = logging.getLogger(__name__)


# Largest value the Integer id columns can hold
MAX_DOCUMENT_ID = 2**31 - 1


def parse_document_id(ref: str) -> Optional[int]:
    """Return the numeric identity in ``ref``, or None if it cannot name a document."""
    if not (ref.isascii() and ref.isdigit()):
        return None
    document_id = int(ref)
    return document_id if document_id <= MAX_DOCUMENT_ID else None


@router.post("/{subreddit_name}/posts", status_code=201, response_model=PostCreatedResponse)
async def create_post(
    subreddit_name: str,
    payload: Any = Depends(read_json_body),
    store: DocumentStore = Depends(get_store),
) -> PostCreatedResponse:
    """
    Create a post in an existing subreddit.

    The subreddit is looked up before the payload is validated, so a
    malformed post against a missing subreddit yields 404, not 400.
    """
    try:
        if not await store.collection("subreddits").find_one(name=subreddit_name):
            raise NotFound("Subreddit does not exist")

        post = validate_payload(PostWrite, schema_fields_only(PostWrite, payload))

        result = await store.collection("posts").insert_one({
            "title": post.title,
            "content": post.content,
            "subreddit_name": subreddit_name,
            "created_at": datetime.now(timezone.utc),
        })

        logger.info(f"Created post {result.inserted_id} in '{subreddit_name}'")
        return PostCreatedResponse(message="Post created successfully", post_id=result.inserted_id)

    except RedditApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating post in '{subreddit_name}': {str(e)}", exc_info=True)
        raise InternalError()


@router.get("/{subreddit_name}/posts", response_model=List[PostDTO])
async def list_posts(
    subreddit_name: str,
    store: DocumentStore = Depends(get_store),
) -> List[PostDTO]:
    """
    List every post of a subreddit in insertion order.

    A subreddit without posts (or one that does not exist) yields 404.
    """
    try:
        posts = await store.collection("posts").find(subreddit_name=subreddit_name)
        if not posts:
            raise NotFound("No posts found for this subreddit")

        logger.info(f"Retrieved {len(posts)} posts for '{subreddit_name}'")
        return [PostDTO.model_validate(post) for post in posts]

    except RedditApiError:
        raise
    except Exception as e:
        logger.error(f"Error retrieving subreddit posts: {str(e)}", exc_info=True)
        raise InternalError()


@router.put("/{subreddit_name}/posts/{post_ref}", response_model=MessageResponse)
async def update_post(
    subreddit_name: str,
    post_ref: str,
    payload: Any = Depends(read_json_body),
    store: DocumentStore = Depends(get_store),
) -> MessageResponse:
    """Replace the title and content of a post. Concurrent updates are last-write-wins."""
    try:
        post = validate_payload(PostWrite, schema_fields_only(PostWrite, payload))

        post_id = parse_document_id(post_ref)
        if post_id is None:
            raise NotFound("Post does not exist")

        result = await store.collection("posts").update_one(
            {"id": post_id, "subreddit_name": subreddit_name},
            {"title": post.title, "content": post.content},
        )
        if result.matched_count == 0:
            raise NotFound("Post does not exist")

        logger.info(f"Updated post {post_id} in '{subreddit_name}'")
        return MessageResponse(message="Post updated successfully")

    except RedditApiError:
        raise
    except Exception as e:
        logger.error(f"Error updating post {post_ref}: {str(e)}", exc_info=True)
        raise InternalError()
