# app/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.settings import get_settings
from app.errors import register_exception_handlers
from app.routers.auth import router as auth_router
from app.routers.users import router as users_router
from app.routers.exercises import router as exercises_router
from app.routers.workouts import router as workouts_router
from app import db as app_db
from app.db import SessionLocal  # for healthz DB check

log = logging.getLogger("uvicorn")
settings = get_settings()

def configure_logging(level: str) -> logging.Logger:
    """uvicorn only wires up its own loggers; give the app.* tree a handler too."""
    app_log = logging.getLogger("app")
    app_log.setLevel(level)
    if not app_log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s - %(message)s"))
        app_log.addHandler(handler)
    return app_log

configure_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    app_db.init_db()
    yield
    app_db.close_db()

app = FastAPI(
    title="Workout Tracker API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Sign-up & sign-in"},
        {"name": "users", "description": "Per-user workout history and statistics"},
        {"name": "exercises", "description": "Exercise catalogue"},
        {"name": "workouts", "description": "Workouts, their exercises and sets"},
    ],
)

register_exception_handlers(app)

# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
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
    return {"ok": True, "name": "Workout Tracker API"}

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
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(exercises_router)
app.include_router(workouts_router)
