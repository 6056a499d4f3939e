import logging
from typing import Iterable, Optional
from fastapi import UploadFile
from boards import BoardRegistry
from database import DatabaseManager
from exceptions import BoardNotFoundError, ThreadNotFoundError
from models import Board, Post, PostSubmission, Thread
from security import SubmissionValidator
from threads import ThreadStore
from uploads import ImageStorage, has_file
from config import DEFAULT_BOARDS


logger = logging.getLogger(__name__)


class Imageboard:
    """Main imageboard class that orchestrates all components."""

    def __init__(self, db: DatabaseManager, upload_dir: str,
                 seed: Optional[Iterable[Board]] = None,
                 thread_store: Optional[ThreadStore] = None,
                 validator: Optional[SubmissionValidator] = None) -> None:
        self.db = db
        self.seed = list(seed) if seed is not None else [Board(**board) for board in DEFAULT_BOARDS]
        self.registry = BoardRegistry(db)
        self.threads = thread_store or ThreadStore(db)
        self.validator = validator or SubmissionValidator()
        self.storage = ImageStorage(upload_dir)

    async def startup(self) -> list[Board]:
        await self.db.initialize()
        return await self.registry.initialize(self.seed)

    async def get_boards(self) -> list[Board]:
        return await self.registry.get_boards()

    async def get_board(self, board_id: str) -> Board:
        board = await self.registry.find(board_id)
        if board is None:
            raise BoardNotFoundError()
        return board

    async def get_thread(self, board_id: str, thread_id: Optional[int]) -> Thread:
        thread = await self.threads.get_thread(board_id, thread_id) if thread_id is not None else None
        if thread is None:
            raise ThreadNotFoundError()
        return thread

    async def list_threads(self, board_id: str) -> list[Thread]:
        return await self.threads.list_threads(board_id)

    # High-level imageboard operations
    async def create_thread(self, board_id: str, submission: PostSubmission,
                            image: Optional[UploadFile] = None) -> Thread:
        """Validate a submission, store its image and open a new thread."""
        submission = submission.model_copy(update={"has_image": has_file(image)})
        self.validator.validate(submission)
        await self.get_board(board_id)

        image_path = await self.storage.save(image) if has_file(image) else None
        return await self.threads.create_thread(
            board_id, submission.subject, submission.name, submission.content, image_path
        )

    async def reply_to_thread(self, board_id: str, thread_id: Optional[int], submission: PostSubmission,
                              image: Optional[UploadFile] = None) -> Post:
        """Validate a submission, store its image and bump an existing thread."""
        submission = submission.model_copy(update={"has_image": has_file(image)})
        self.validator.validate(submission)
        await self.get_board(board_id)
        await self.get_thread(board_id, thread_id)

        image_path = await self.storage.save(image) if has_file(image) else None
        return await self.threads.append_reply(
            board_id, thread_id, submission.name, submission.content, image_path
        )

    async def update_boards(self) -> list[Board]:
        """Rewrite the board set from the seed list. Unauthenticated by design."""
        return await self.registry.refresh(self.seed)
