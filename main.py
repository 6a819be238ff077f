from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.logger import setup_logging
from config.settings import get_settings
from routes import coloring_page

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()

    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# V1 APIs
app.include_router(coloring_page.router, prefix="/api/v1", tags=["Coloring Pages"])

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=settings.APP_PORT)
