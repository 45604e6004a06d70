from __future__ import annotations

import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chefs import router as chefs_router
from chefs import service as chefs_service
from core import db
from core.errors import register_error_handlers
from core.logs import configure_logging
from diagnostics import router as diagnostics_router
from events import router as events_router
from events import service as events_service
from sections import router as sections_router
from sections import service as sections_service
from users import router as users_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Create the DB pool once per process; connections open on first query.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


app = FastAPI(title="sections-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(
    app,
    path_not_found={
        "chef_id": chefs_service.CHEF_NOT_FOUND,
        "event_id": events_service.EVENT_NOT_FOUND,
        "section_id": sections_service.SECTION_NOT_FOUND,
    },
)

app.include_router(diagnostics_router.router, tags=["diagnostics"])
app.include_router(users_router.router, tags=["users"])
app.include_router(chefs_router.router, tags=["chefs"])
app.include_router(sections_router.router, tags=["sections"])
app.include_router(events_router.router, tags=["events"])


def run() -> None:
    """
    Console entry point: serve the app with uvicorn.
    """
    host = os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = int(os.environ.get("PORT", "5000").strip() or "5000")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
