import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded

from app.challenges import routes as challenges_router
from app.chat import routes as chat_router
from app.journals import routes as journals_router
from app.status import routes as status_router
from app.study import routes as study_router
from app.summary import routes as summary_router
from app.challenges.service import seed_default_challenges
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.database import Base, SessionLocal, engine
from app.core.errors import register_exception_handlers
from app.core.rate_limit import limiter, rate_limit_exceeded_handler

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="EchoOrb API",
    version="1.0.0",
    description="Backend for EchoOrb: mood chat, encrypted journaling with AI analysis, study tools and wellness challenges.",
)

# CORS config
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate limiting & error bodies
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
register_exception_handlers(app)

# Routers
app.include_router(chat_router.router)
app.include_router(journals_router.router)
app.include_router(study_router.router)
app.include_router(summary_router.router)
app.include_router(challenges_router.router)
app.include_router(status_router.router)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root() -> str:
    return "EchoOrb API is running"


# DB Tables
@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_default_challenges(db)
    finally:
        db.close()
