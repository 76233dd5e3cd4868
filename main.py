import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import LOG_LEVEL
from app.routers import ai
from app.services import insights

# --- Logging ---
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


# --- Lifespan ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    if insights.ai_client:
        logger.info("AI insights enabled")
    else:
        logger.warning("AI insights disabled (no Gemini client)")
    yield


# --- FastAPI Initialization ---
app = FastAPI(title="Chi Tieu Insights API", lifespan=lifespan)

# --- CORS ---
origins = ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- API Routers ---
app.include_router(ai.router, prefix="/api")
