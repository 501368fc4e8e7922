from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quiz_admin.api.v1 import api_router
from quiz_admin.core.auth_provider import DocumentAuthProvider
from quiz_admin.core.config import settings
from quiz_admin.core.database import init_db
from quiz_admin.core.error_handlers import register_exception_handlers
from quiz_admin.core.logging_config import setup_logging
from quiz_admin.helpers.jwt_handler import JWT


@asynccontextmanager
async def lifespan(app: FastAPI):
    client, store = init_db(settings)
    app.state.store = store
    app.state.auth_provider = DocumentAuthProvider(
        store,
        JWT(settings.SECRET_KEY, settings.ALGORITHM, settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    yield
    client.close()


def make_app():
    setup_logging()
    app = FastAPI(
        lifespan=lifespan,
        title=settings.PROJECT_NAME,
        version=settings.API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(
        api_router,
    )
    return app


app = make_app()


@app.get("/")
def read_root():
    return {"name": settings.PROJECT_NAME, "environment": settings.ENV, "version": settings.API_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=9005,
        reload=True,
        timeout_graceful_shutdown=360,
        proxy_headers=True,
        forwarded_allow_ips="*"
    )
