"""
Comment API endpoints (read-only).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from reddit_api.api.dependencies import get_store
from reddit_api.api.endpoints.posts import parse_document_id
from reddit_api.core.document_store import DocumentStore
from reddit_api.core.errors import InternalError, NotFound, RedditApiError
from reddit_api.models.dtos import CommentDTO

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/{subreddit_name}/posts/{post_ref}/comments", response_model=List[CommentDTO])
async def list_comments(
    subreddit_name: str,
    post_ref: str,
    store: DocumentStore = Depends(get_store),
) -> List[CommentDTO]:
    """List the comments of a post in insertion order. No comments yields 404."""
    try:
        post_id = parse_document_id(post_ref)
        comments = [] if post_id is None else await store.collection("comments").find(post_id=post_id)
        if not comments:
            raise NotFound("No comments found for this post")

        logger.info(f"Retrieved {len(comments)} comments for post {post_id}")
        return [CommentDTO.model_validate(comment) for comment in comments]

    except RedditApiError:
        raise
    except Exception as e:
        logger.error(f"Error retrieving comments for post {post_ref}: {str(e)}", exc_info=True)
        raise InternalError()
