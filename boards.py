import logging
from typing import Iterable, Optional
from database import DatabaseManager
from models import Board
from config import BOARDS_KEY, THREADS_KEY_PREFIX


logger = logging.getLogger(__name__)


def threads_key(board_id: str) -> str:
    return f"{THREADS_KEY_PREFIX}{board_id}"


class BoardRegistry:
    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    async def get_boards(self) -> list[Board]:
        records = await self.db.get(BOARDS_KEY) or []
        return [Board(**record) for record in records]

    async def find(self, board_id: str) -> Optional[Board]:
        for board in await self.get_boards():
            if board.id == board_id:
                return board
        return None

    async def initialize(self, seed: Iterable[Board]) -> list[Board]:
        """Merge seed boards missing from the persisted set and save it.

        Existing boards (and their threads) are left untouched, so running
        this twice with the same seed changes nothing.
        """
        boards = await self.get_boards()
        known = {board.id for board in boards}

        added = 0
        for board in seed:
            if board.id in known:
                continue
            boards.append(board)
            known.add(board.id)
            if not await self.db.has(threads_key(board.id)):
                await self.db.set(threads_key(board.id), [])
            added += 1

        await self.db.set(BOARDS_KEY, [board.model_dump() for board in boards])
        logger.info("Boards initialized: %d total, %d added", len(boards), added)
        return boards

    async def refresh(self, seed: Iterable[Board]) -> list[Board]:
        """Replace the persisted board set with the seed verbatim.

        Thread collections are never deleted; a board dropped from the seed
        keeps its data in the store but becomes unreachable.
        """
        boards = list(seed)
        for board in boards:
            if not await self.db.has(threads_key(board.id)):
                await self.db.set(threads_key(board.id), [])

        await self.db.set(BOARDS_KEY, [board.model_dump() for board in boards])
        logger.info("Boards refreshed: %d total", len(boards))
        return boards
