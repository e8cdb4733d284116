# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from volunteer_hub.api.endpoints import auth, needs, volunteer_requests
from volunteer_hub.config import settings
from volunteer_hub.db.database import Database, resolve_database_url
from volunteer_hub.errors import Internal, VolunteerHubError
from volunteer_hub.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    app.state.database = Database(resolve_database_url())
    logger.info("FastAPI application starting up. Database migrations are managed by Alembic.")
    try:
        yield
    finally:
        app.state.database.dispose()
        logger.info("FastAPI application shutting down.")


app = FastAPI(
    title="Volunteer Hub Backend API",
    description="API for posting volunteer needs and requesting to volunteer.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(VolunteerHubError)
def volunteer_hub_error_handler(request: Request, exc: VolunteerHubError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return volunteer_hub_error_handler(request, Internal())


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unexpected failure on %s %s", request.method, request.url.path, exc_info=exc)
    return volunteer_hub_error_handler(request, Internal())


app.include_router(auth.router)
app.include_router(needs.router)
app.include_router(volunteer_requests.router)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "Server is running"


@app.get("/health")
def health_check(request: Request):
    try:
        request.app.state.database.ping()
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database connection failed",
        )
    return {"status": "ok", "database_connection": "successful"}
