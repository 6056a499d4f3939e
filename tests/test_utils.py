from config import MAX_POST_ID
from utils import generate_post_id, timestamp


def test_generated_ids_are_in_range():
    ids = [generate_post_id() for _ in range(1000)]
    assert all(isinstance(i, int) and 0 <= i < MAX_POST_ID for i in ids)


def test_generated_ids_vary():
    # Collisions are possible; a thousand identical draws is not
    assert len({generate_post_id() for _ in range(1000)}) > 1


def test_timestamp_is_epoch_milliseconds():
    assert timestamp() > 1_600_000_000_000
