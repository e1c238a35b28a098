"""HTTP API over subreddits, posts and comments."""

__version__ = "0.1.0"
