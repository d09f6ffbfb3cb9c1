"""
FastAPI application entrypoint.
APIs: categories, questions. Run with: uvicorn qbank.main:app --reload --port 8000

API base path: routes are mounted at root (no /api/v1 prefix).
  - Categories: GET/POST /categories, GET/PATCH/DELETE /categories/{slug}, GET /categories/{slug}/questions
  - Questions:  GET/POST /questions, GET/PATCH/DELETE /questions/{id}
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qbank.config import settings
from qbank.api.categories import router as categories_router
from qbank.api.questions import router as questions_router
from qbank.api.errors import register_error_handlers

app = FastAPI(
    title="Question Bank API",
    description="Categories and their questions: CRUD with slugs derived from titles.",
    version="0.1.0",
)

_origins = settings.origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["*"],
    allow_credentials="*" not in _origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(categories_router)
app.include_router(questions_router)


@app.on_event("startup")
def startup():
    """Configure logging and init the database (tables on SQLite, seed categories)."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    _log = logging.getLogger("qbank.main")
    if (settings.env or "").strip().lower() == "production" and settings.database_url.startswith("sqlite"):
        _log.warning("ENV=production with a SQLite DATABASE_URL; run alembic upgrade head against PostgreSQL instead.")
    from qbank.database import init_db
    init_db()
    _log.info("Database ready (%s)", settings.database_url.split("@")[-1])


@app.get("/")
def root():
    """Service banner."""
    return {"hello": "qbank", "docs": "/docs"}


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "message": "Question Bank API"}
