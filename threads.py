import asyncio
import logging
from collections import defaultdict
from typing import Callable, Optional
from boards import threads_key
from database import DatabaseManager
from exceptions import EmptyPostError, ThreadNotFoundError
from models import Post, Thread
from posts import new_post
from utils import generate_post_id, timestamp
from config import DEFAULT_SUBJECT, MAX_POSTS_PER_THREAD, MAX_THREADS_PER_BOARD


logger = logging.getLogger(__name__)


def _is_empty(content: Optional[str], image: Optional[str]) -> bool:
    return not (content and content.strip()) and not image


class ThreadStore:
    """Per-board thread collections persisted under ``threads_<board_id>``.

    Each write loads the whole collection, mutates it, applies the retention
    caps and saves it back. A lock per board serializes those cycles so
    concurrent replies cannot overwrite each other.
    """

    def __init__(self, db: DatabaseManager, id_factory: Callable[[], int] = generate_post_id,
                 clock: Callable[[], int] = timestamp) -> None:
        self.db = db
        self.id_factory = id_factory
        self.clock = clock
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def _load(self, board_id: str) -> list[Thread]:
        records = await self.db.get(threads_key(board_id)) or []
        return [Thread.model_validate(record) for record in records]

    async def _save(self, board_id: str, threads: list[Thread]) -> None:
        await self.db.set(threads_key(board_id), [thread.to_record() for thread in threads])

    async def list_threads(self, board_id: str) -> list[Thread]:
        """Threads of a board, most recently bumped first."""
        threads = await self._load(board_id)
        threads.sort(key=lambda t: t.last_post_time, reverse=True)
        return threads

    async def get_thread(self, board_id: str, thread_id: int) -> Optional[Thread]:
        for thread in await self._load(board_id):
            if thread.id == thread_id:
                return thread
        return None

    async def create_thread(self, board_id: str, subject: Optional[str], name: Optional[str],
                            content: Optional[str], image: Optional[str]) -> Thread:
        if _is_empty(content, image):
            raise EmptyPostError()

        async with self._locks[board_id]:
            now = self.clock()
            opening = new_post(self.id_factory, name, content, image, now)
            thread = Thread(
                id=self.id_factory(),
                subject=subject or DEFAULT_SUBJECT,
                posts=[opening],
                post_count=1,
                last_post_time=now,
            )

            threads = await self._load(board_id)
            threads.append(thread)
            threads = self._apply_thread_retention(board_id, threads)
            await self._save(board_id, threads)

        logger.info("Created thread %d on /%s/", thread.id, board_id)
        return thread

    async def append_reply(self, board_id: str, thread_id: int, name: Optional[str],
                           content: Optional[str], image: Optional[str]) -> Post:
        if _is_empty(content, image):
            raise EmptyPostError()

        async with self._locks[board_id]:
            threads = await self._load(board_id)
            thread = next((t for t in threads if t.id == thread_id), None)
            if thread is None:
                raise ThreadNotFoundError()

            now = self.clock()
            post = new_post(self.id_factory, name, content, image, now)
            thread.posts.append(post)
            thread.post_count += 1
            thread.last_post_time = now
            self._apply_post_retention(board_id, thread)
            await self._save(board_id, threads)

        logger.info("Reply %d added to thread %d on /%s/", post.id, thread_id, board_id)
        return post

    @staticmethod
    def _apply_thread_retention(board_id: str, threads: list[Thread]) -> list[Thread]:
        threads.sort(key=lambda t: t.last_post_time, reverse=True)
        if len(threads) > MAX_THREADS_PER_BOARD:
            logger.info("Evicting %d thread(s) from /%s/", len(threads) - MAX_THREADS_PER_BOARD, board_id)
        return threads[:MAX_THREADS_PER_BOARD]

    @staticmethod
    def _apply_post_retention(board_id: str, thread: Thread) -> None:
        # post_count keeps counting truncated posts
        if len(thread.posts) > MAX_POSTS_PER_THREAD:
            logger.debug("Truncating thread %d on /%s/ to %d posts", thread.id, board_id, MAX_POSTS_PER_THREAD)
            thread.posts = thread.posts[-MAX_POSTS_PER_THREAD:]
