import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from animelog.routers import health, auth, pages, anime, preferences
from animelog.core.config import get_settings
from animelog.db import Base, engine
from animelog import models  # ensure models are imported

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Animelog API",
    description="Anime tracking: favorites, watch status and genre-based recommendations",
    version="1.0.0"
)

# CORS middleware yapılandırması
origins_env = settings.CORS_ALLOW_ORIGINS or ""
origins = [o.strip() for o in origins_env.split(",") if o.strip()] or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(pages.router)
app.include_router(anime.router)
app.include_router(preferences.router)


@app.on_event("startup")
async def init_db():
    # İlk deploy için otomatik tablo oluşturma (idempotent)
    if settings.AUTO_CREATE_TABLES:
        logger.info("Creating database tables")
        Base.metadata.create_all(bind=engine)
