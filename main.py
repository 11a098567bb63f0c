import asyncio
import json
import os
import socket
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError

from snakegame import config
from snakegame.engine import SnakeGame
from snakegame.state import FOOD_EFFECTS, Direction, GameStatus

app = FastAPI(title="SnakeArcade")

BASE_DIR = Path(__file__).parent
DEFAULT_PORT = 8000

DIRECTION_NAMES = {d.name.lower(): d for d in Direction}


class ClientMessage(BaseModel):
    """Message sent by a browser or bot client."""

    type: Literal["start_game", "action", "reset", "quit"]
    action: Optional[Literal["up", "right", "down", "left"]] = None
    seed: Optional[int] = None


@app.get("/config")
async def get_config():
    """Return the fixed game constants front ends need for drawing."""
    return {
        "width": config.WIDTH,
        "height": config.HEIGHT,
        "max_snake_length": config.MAX_SNAKE_LENGTH,
        "win_length": config.WIN_LENGTH,
        "max_obstacles": config.MAX_OBSTACLES,
        "speed_boost_duration_us": config.SPEED_BOOST_DURATION_US,
        "foods": {
            food_type.name.lower(): {
                "score": effect.score,
                "growth": effect.growth,
                "speed_boost": effect.speed_boost,
                "adds_obstacle": effect.adds_obstacle,
            }
            for food_type, effect in FOOD_EFFECTS.items()
        },
    }


class GameSession:
    """Manages a single game session."""

    def __init__(self):
        self.game: Optional[SnakeGame] = None
        self.pending_direction: Optional[Direction] = None
        self.game_task: Optional[asyncio.Task] = None
        self.running: bool = False

    async def stop(self) -> None:
        """Stop the play loop if one is running."""
        self.running = False
        if self.game_task and not self.game_task.done():
            self.game_task.cancel()
            try:
                await self.game_task
            except asyncio.CancelledError:
                pass
        self.game_task = None


def state_message(game: SnakeGame, msg_type: str = "state_update") -> dict:
    return {
        "type": msg_type,
        "state": game.state.to_dict(),
        "boost_active": game.boost_active,
    }


async def run_play_loop(websocket: WebSocket, session: GameSession):
    """Run the game loop: the snake moves every tick, turning on queued input."""
    game = session.game
    session.running = True
    try:
        while session.running and game.status is GameStatus.RUNNING:
            # Use the queued direction once, then keep going straight
            direction = session.pending_direction
            session.pending_direction = None

            status = game.step(direction)
            await websocket.send_json(state_message(game))

            if status is not GameStatus.RUNNING:
                msg_type = "game_won" if status is GameStatus.WON else "game_over"
                message = state_message(game, msg_type)
                message["final_score"] = game.state.score
                await websocket.send_json(message)
                break

            await asyncio.sleep(game.tick_delay())
    except WebSocketDisconnect:
        pass
    except Exception as e:
        print(f"Game loop error: {e}")
        try:
            await websocket.send_json({"type": "error", "message": f"Game loop error: {e}"})
        except (WebSocketDisconnect, RuntimeError):
            # Client already gone
            pass
    finally:
        session.running = False


async def start_new_game(websocket: WebSocket, session: GameSession, seed: Optional[int]):
    await session.stop()
    session.game = SnakeGame(seed=seed)
    session.pending_direction = None

    await websocket.send_json(state_message(session.game))
    session.game_task = asyncio.create_task(run_play_loop(websocket, session))


@app.websocket("/ws/game")
async def websocket_game(websocket: WebSocket):
    """WebSocket endpoint for real-time play."""
    await websocket.accept()

    session = GameSession()

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = ClientMessage.model_validate(json.loads(data))
            except (json.JSONDecodeError, ValidationError) as e:
                await websocket.send_json({"type": "error", "message": str(e)})
                continue

            if message.type == "start_game":
                await start_new_game(websocket, session, message.seed)

            elif message.type == "action" and session.game:
                if message.action is None:
                    await websocket.send_json({"type": "error", "message": "action requires a direction"})
                    continue
                # Queue the direction for the next tick
                session.pending_direction = DIRECTION_NAMES[message.action]

            elif message.type == "reset" and session.game:
                await start_new_game(websocket, session, message.seed)

            elif message.type == "quit" and session.game:
                await session.stop()
                session.game.quit()
                await websocket.send_json(state_message(session.game, "quit"))

    except WebSocketDisconnect:
        pass
    finally:
        await session.stop()


def pick_port(host: str = "0.0.0.0", first: int = DEFAULT_PORT, span: int = 100) -> int:
    """First port in ``[first, first + span)`` that ``host`` can bind."""
    for port in range(first, first + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind((host, port))
            except OSError:
                continue
        return port
    raise RuntimeError(f"Snake Arcade found no free port between {first} and {first + span - 1}")


if __name__ == "__main__":
    import uvicorn

    load_dotenv(BASE_DIR / ".env")

    port = int(os.environ.get("PORT", 0)) or pick_port()
    print(f"Snake Arcade play server on ws://localhost:{port}/ws/game (config at /config)")
    uvicorn.run(app, host="0.0.0.0", port=port)
