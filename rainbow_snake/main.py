"""FastAPI application: page, static assets, high score and the game WebSocket."""

import json
import logging
import os
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .renderer import Renderer
from .score_store import JsonFileStorage, ScoreStore
from .session import GameSession

logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(ROOT_DIR, "static")
HTML_PATH = os.path.join(ROOT_DIR, "index.html")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI()
    app.state.settings = settings
    app.state.score_store = ScoreStore(JsonFileStorage(settings.store_path))
    app.state.renderer = Renderer(settings.canvas_width, settings.canvas_height, settings.cell_size)

    app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")

    @app.get("/")
    async def serve_index():
        return FileResponse(HTML_PATH, media_type="text/html")

    @app.get("/api/high-score")
    async def high_score():
        return {"high_score": app.state.score_store.load()}

    @app.websocket("/ws")
    async def websocket_endpoint(ws: WebSocket):
        await ws.accept()
        session = GameSession(ws, app.state.settings, app.state.score_store, app.state.renderer)
        logger.info("Session %s opened", session.session_id)
        try:
            await session.send_welcome()
            while True:
                raw = await ws.receive_text()
                try:
                    msg = json.loads(raw)
                except ValueError:
                    logger.debug("Session %s: dropping non-JSON message", session.session_id)
                    continue
                if isinstance(msg, dict):
                    await session.handle(msg)
        except WebSocketDisconnect:
            pass
        except Exception:
            logger.exception("Session %s failed", session.session_id)
        finally:
            session.close()
            logger.info("Session %s closed", session.session_id)

    return app

