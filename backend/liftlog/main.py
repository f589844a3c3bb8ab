# liftlog/main.py
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from liftlog import models  # noqa: F401  # registers tables on Base.metadata
from liftlog.db import Base, SessionLocal, engine
from liftlog.routers.sessions import router as sessions_router
from liftlog.routers.sets import router as sets_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.settings import get_settings
from liftlog.store import SessionStore

log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger("liftlog").setLevel(settings.LOG_LEVEL)
    if engine.url.get_backend_name() == "sqlite":
        # Local database: no migration step, create tables on first run
        Base.metadata.create_all(bind=engine)

    store = SessionStore(SessionLocal, persist_on_start=settings.PERSIST_ON_START)
    store.subscribe(lambda state: log.debug(
        "session snapshot: current=%s history=%d",
        state.current_workout.id if state.current_workout else None,
        len(state.workouts),
    ))
    await run_in_threadpool(store.load)
    app.state.store = store
    yield


app = FastAPI(
    title="LiftLog API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "session", "description": "Workout in progress"},
        {"name": "sets", "description": "Sets of the workout in progress"},
        {"name": "workouts", "description": "Finished workouts"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(sessions_router)
app.include_router(sets_router)
app.include_router(workouts_router)
