#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from database import DatabaseManager
from exceptions import (Exceptions, BoardNotFoundError, ThreadNotFoundError, ValidationError,
                        ReservedNameMismatch)
from forum import Imageboard
from models import BoardUpdateResponse, FlashMessage, PostSubmission
from posts import format_post_content, format_timestamp
from utils import timestamp
from config import (DB_PATH, UPLOAD_DIR, UPLOAD_URL_PREFIX, SECRET_KEY, DEFAULT_HOST, DEFAULT_PORT,
                    HTTP_INTERNAL_SERVER_ERROR, MSG_THREAD_CREATED, MSG_REPLY_POSTED, PREVIEW_REPLIES)


logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters["format_post_content"] = format_post_content
templates.env.filters["format_timestamp"] = format_timestamp


def set_flash(request: Request, kind: str, message: str):
    request.session["flash_message"] = FlashMessage(type=kind, message=message).model_dump()


def pop_flash(request: Request) -> Optional[FlashMessage]:
    data = request.session.pop("flash_message", None)
    return FlashMessage(**data) if data else None


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def parse_thread_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def create_app(db_path: str = DB_PATH, upload_dir: str = UPLOAD_DIR) -> FastAPI:
    imageboard = Imageboard(DatabaseManager(db_path), upload_dir)

    app = FastAPI(title="sChan", description="Anonymous imageboard", version="1.0.0")
    app.state.imageboard = imageboard
    app.add_middleware(SessionMiddleware, secret_key=SECRET_KEY)

    async def render(request: Request, template: str, **context):
        context["boards"] = await imageboard.get_boards()
        context["flash_message"] = pop_flash(request)
        return templates.TemplateResponse(request, template, context)

    @app.get("/")
    async def index(request: Request):
        return await render(request, "index.html")

    @app.get("/board/{board_id}")
    async def view_board(request: Request, board_id: str):
        board = await imageboard.registry.find(board_id)
        if not board:
            raise Exceptions.BOARD_NOT_FOUND

        threads = await imageboard.list_threads(board_id)
        return await render(request, "board.html", board=board, threads=threads,
                            preview_replies=PREVIEW_REPLIES)

    @app.get("/board/{board_id}/thread/{thread_id}")
    async def view_thread(request: Request, board_id: str, thread_id: str):
        board = await imageboard.registry.find(board_id)
        if not board:
            raise Exceptions.BOARD_NOT_FOUND

        try:
            thread = await imageboard.get_thread(board_id, parse_thread_id(thread_id))
        except ThreadNotFoundError:
            raise Exceptions.THREAD_NOT_FOUND

        return await render(request, "thread.html", board=board, thread=thread)

    @app.post("/board/{board_id}/thread")
    async def create_thread(request: Request, board_id: str,
                            subject: Optional[str] = Form(None),
                            name: Optional[str] = Form(None),
                            content: Optional[str] = Form(None),
                            captcha: Optional[str] = Form(None),
                            image: Optional[UploadFile] = File(None)):
        submission = PostSubmission(subject=subject, name=name, content=content, captcha=captcha)
        try:
            thread = await imageboard.create_thread(board_id, submission, image)
        except BoardNotFoundError as e:
            set_flash(request, "error", e.message)
            return redirect("/")
        except ValidationError as e:
            set_flash(request, "error", e.message)
            return redirect(f"/board/{board_id}")

        set_flash(request, "success", MSG_THREAD_CREATED)
        return redirect(f"/board/{board_id}/thread/{thread.id}")

    @app.post("/board/{board_id}/thread/{thread_id}/reply")
    async def reply_to_thread(request: Request, board_id: str, thread_id: str,
                              name: Optional[str] = Form(None),
                              content: Optional[str] = Form(None),
                              captcha: Optional[str] = Form(None),
                              image: Optional[UploadFile] = File(None)):
        submission = PostSubmission(name=name, content=content, captcha=captcha)
        thread_url = f"/board/{board_id}/thread/{thread_id}"
        try:
            await imageboard.reply_to_thread(board_id, parse_thread_id(thread_id), submission, image)
        except BoardNotFoundError as e:
            set_flash(request, "error", e.message)
            return redirect("/")
        except ThreadNotFoundError as e:
            set_flash(request, "error", e.message)
            return redirect(f"/board/{board_id}")
        except ValidationError as e:
            set_flash(request, "error", e.message)
            return redirect(thread_url)

        set_flash(request, "success", MSG_REPLY_POSTED)
        return redirect(thread_url)

    @app.get("/admin/update-boards")
    async def update_boards():
        try:
            boards = await imageboard.update_boards()
        except Exception as e:
            logger.exception("Error updating boards")
            return JSONResponse(
                status_code=HTTP_INTERNAL_SERVER_ERROR,
                content=BoardUpdateResponse(success=False, message="Error updating boards",
                                            error=str(e)).model_dump(exclude_none=True)
            )
        return BoardUpdateResponse(success=True, message="Boards updated successfully",
                                   boards=boards).model_dump(exclude_none=True)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "timestamp": timestamp()}

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(ReservedNameMismatch)
    async def reserved_name_handler(request: Request, exc: ReservedNameMismatch):
        logger.warning("Rejected post on %s: %s", request.url.path, exc.message)
        return PlainTextResponse("Internal Server Error", status_code=HTTP_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=HTTP_INTERNAL_SERVER_ERROR)

    # Mount static files
    app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=upload_dir), name="uploads")
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "public")), name="static")

    @app.on_event("startup")
    async def startup_event():
        boards = await imageboard.startup()
        logger.info("sChan ready with %d boards", len(boards))

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    print(f"sChan is running on http://localhost:{DEFAULT_PORT}")
    uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT)
