"""Per-connection game session and message serialization."""

import json
import logging
import random
from typing import Optional

from fastapi import WebSocket, WebSocketDisconnect

from .config import Settings
from .game import SnakeGame
from .input_adapter import InputAdapter
from .models import GamePhase, SoundCue
from .renderer import Renderer
from .score_store import ScoreStore
from .ticker import PeriodicTicker

logger = logging.getLogger(__name__)


def build_state_msg(game: SnakeGame) -> str:
    st = game.state
    return json.dumps({
        "type": "state",
        "phase": game.phase.value,
        "score": st.score,
        "level": st.level,
        "high_score": game.high_score,
        "paused": st.paused,
        "boost": st.boost_active,
        "interval": game.tick_interval,
    })


def build_welcome_msg(game: SnakeGame, settings: Settings) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [game.width, game.height],
        "canvas": [settings.canvas_width, settings.canvas_height],
        "cell_size": settings.cell_size,
        "high_score": game.high_score,
    })


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class GameSession:
    """One websocket, one game. Frames go out as PNG bytes after every tick."""

    def __init__(self, ws: WebSocket, settings: Settings, score_store: ScoreStore,
                 renderer: Renderer, rng: Optional[random.Random] = None):
        self.ws = ws
        self.settings = settings
        self.renderer = renderer
        self.session_id = f"s{id(ws)}"
        width, height = settings.grid_size
        self.ticker = PeriodicTicker(self.on_tick)
        self.game = SnakeGame(width, height, ticker=self.ticker, score_store=score_store, rng=rng)
        self.input = InputAdapter(self.game)

    async def send_welcome(self):
        await self.ws.send_text(build_welcome_msg(self.game, self.settings))

    async def handle(self, msg: dict):
        msg_type = msg.get("type")
        if msg_type in ("start", "restart"):
            self.game.start()
            logger.info("Session %s: %s", self.session_id, msg_type)
            await self.push_frame()
        elif msg_type == "key":
            key = msg.get("key")
            if not isinstance(key, str):
                return
            paused, boost = self.game.state.paused, self.game.state.boost_active
            self.input.on_key(key)
            if self.game.state.paused != paused:
                await self.ws.send_text(json.dumps({
                    "type": "pause_state",
                    "paused": self.game.state.paused,
                }))
            elif self.game.state.boost_active != boost:
                await self.ws.send_text(build_state_msg(self.game))
        elif msg_type in ("touchstart", "touchmove"):
            x, y = msg.get("x"), msg.get("y")
            if not (_is_number(x) and _is_number(y)):
                return
            if msg_type == "touchstart":
                self.input.on_touch_start(x, y)
            else:
                self.input.on_touch_move(x, y)
        else:
            logger.debug("Session %s: ignoring message type %r", self.session_id, msg_type)

    async def on_tick(self):
        if not self.game.tick():
            return
        try:
            await self.push_frame()
        except (WebSocketDisconnect, RuntimeError):
            logger.debug("Session %s: client gone, stopping ticks", self.session_id)
            self.ticker.cancel()

    async def push_frame(self):
        await self.ws.send_bytes(self.renderer.render_png(self.game.state))
        await self.ws.send_text(build_state_msg(self.game))
        for cue in self.game.drain_sound_cues():
            await self.play(cue)
        if self.game.phase is GamePhase.GAME_OVER:
            await self.ws.send_text(json.dumps({
                "type": "game_over",
                "score": self.game.state.score,
                "high_score": self.game.high_score,
            }))

    async def play(self, cue: SoundCue):
        try:
            await self.ws.send_text(json.dumps({"type": "sound", "cue": cue.value}))
        except Exception as e:
            logger.debug("Session %s: dropped %s cue: %s", self.session_id, cue.value, e)

    def close(self):
        self.ticker.cancel()
