import random
from datetime import datetime, timezone
from config import MAX_POST_ID


def timestamp() -> int:
    """Current time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def generate_post_id() -> int:
    # Not unique: two calls may collide, lookups return the first match
    return random.randrange(MAX_POST_ID)
