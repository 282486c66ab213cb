from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aes_demo.routers import get_routers
from aes_demo.shared import Logger, load_config
from aes_demo.shared.cache import CacheHelper

logger = Logger(__name__).get_logger()

config = load_config()

cache_helper = CacheHelper()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not config.encryption.key:
        logger.warning("No encryption key configured; every request will be rejected.")

    if config.cache.enabled:
        await cache_helper.init(config.cache.url)
    app.state.cache = cache_helper

    try:
        yield
    finally:
        await cache_helper.disconnect()


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(lifespan=lifespan)

for router in get_routers():
    app.include_router(router)

origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info("Starting encrypted demo server")


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "aes_demo.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
