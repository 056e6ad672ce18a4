import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.api.products import router as products_router
from app.config import Settings, load_settings
from app.db.engine import AppContext
from app.db.schema import metadata
from app.errors import install_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    context: AppContext = app.state.context
    metadata.create_all(context.engine)
    logger.info("Store ready at %s", context.engine.url.render_as_string(hide_password=True))
    yield
    context.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    app = FastAPI(
        title="Product Catalog API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = AppContext(settings)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(products_router)
    install_error_handlers(app)
    return app


app = create_app()


def serve() -> None:
    import uvicorn

    settings: Settings = app.state.context.settings
    logger.info("Starting Product Catalog API on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
