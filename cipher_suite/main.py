from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cipher_suite import __version__
from cipher_suite.api.v1.router import api_router
from cipher_suite.core.config import Settings, get_settings
from cipher_suite.core.logging import configure_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API, mounting the v1 routes under the configured prefix."""
    settings = settings or get_settings()
    prefix = settings.api_v1_prefix

    app = FastAPI(
        title=settings.app_name,
        description="Encrypt and decrypt text with the Caesar, Vigenère and Playfair ciphers.",
        version=__version__,
        debug=settings.debug,
        openapi_url=f"{prefix}/openapi.json",
        docs_url=f"{prefix}/docs",
        redoc_url=None,
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["Content-Type"],
        )

    app.include_router(api_router, prefix=prefix)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn (the ``cipher-suite-api`` script)."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "cipher_suite.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
