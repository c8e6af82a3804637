import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from api.app.config import settings
from api.app.errors import register_exception_handlers
from api.app.logging_setup import configure_logging
from api.app.routers.receipts import router as receipts_router
from common.store.points import InMemoryPointsStore

LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    LOG.info("Receipt processor ready env=%s", settings.app_env)
    yield

app = FastAPI(lifespan=lifespan, title="Receipt Processor API", version="0.1.0")
app.state.store = InMemoryPointsStore()

register_exception_handlers(app)
app.include_router(receipts_router)

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Receipt Processor API Ready"

@app.get("/health")
def health():
    return {
        "status": "OK",
        "version": app.version,
        "env": settings.app_env,
        "services": {
            "store": "memory",
        },
    }


def run() -> None:
    configure_logging(settings.log_level)
    LOG.info("Server starting port=%s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
