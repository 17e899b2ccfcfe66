import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from navroute.api.profiles_routes import router as profiles_router
from navroute.api.routing_routes import router as routing_router
from navroute.api.status import router as status_router
from navroute.config import settings
from navroute.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("navroute starting; Valhalla endpoint %s", settings.VALHALLA_BASE_URL)
    yield


app = FastAPI(title="navroute", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routing_router)
app.include_router(status_router)
app.include_router(profiles_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "navroute.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
