import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from news_api.config import settings
from news_api.database import create_tables, engine
from news_api.errors import register_error_handlers
from news_api.log import configure_logging
from news_api.middleware import RequestLogMiddleware
from news_api.routers import api, articles, comments, topics, users

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting news API (env=%s)", settings.APP_ENV)
    if settings.CREATE_TABLES:
        await create_tables()
    yield
    # Shutdown
    await engine.dispose()
    logger.info("Database engine disposed")

app = FastAPI(
    title="News API",
    description="Articles, comments, topics and users with votes, filtering and pagination",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(api.router)
app.include_router(topics.router)
app.include_router(articles.router)
app.include_router(comments.router)
app.include_router(users.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
