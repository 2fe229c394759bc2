"""HTTP API entrypoint for driving an exploration session from a web client."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from explorer import ExplorerEnv
from infra.logger import get_logger

log = get_logger(__name__)

app = FastAPI(title="Map Explorer")
session: ExplorerEnv | None = None


# Allow a browser-based client (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class StartRequest(BaseModel):
    sequence: str


class CommandRequest(BaseModel):
    command: str
    sequence: str | None = None


@app.post("/start")
def start(request: StartRequest):
    global session
    env = ExplorerEnv()
    result = env.reveal(request.sequence)
    if not result.success:
        raise HTTPException(400, result.message)
    session = env
    log.info("Exploration session started")
    return result.to_dict()


@app.post("/command")
def command(request: CommandRequest):
    global session
    if session is None:
        raise HTTPException(400, "No active session")
    try:
        result = session.execute(request.command, request.sequence)
    except RuntimeError as exc:
        raise HTTPException(400, str(exc)) from exc
    if result.done:
        session = None
    return result.to_dict()


@app.get("/map")
def current_map():
    if session is None:
        raise HTTPException(400, "No active session")
    return {"map": session.render(), "grid": session.engine.grid.to_dict()}


@app.post("/stop")
def stop():
    global session
    if session is None:
        raise HTTPException(400, "No active session")
    session = None
    return {"success": True, "message": "Session closed"}


@app.get("/status")
def status():
    if session is None:
        return {"active": False}
    return {"active": True, **session.status()}
