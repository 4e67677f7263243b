from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

import config
import database
from auth import router as auth_router
from exceptions import PortfolioError, ValidationError
from logging_config import logger
from middleware import RequestLoggingMiddleware
from portfolio import router as portfolio_router, seed_all


@asynccontextmanager
async def lifespan(app: FastAPI):
    insecure = config.insecure_defaults()
    if insecure:
        logger.warning(f"Running with development defaults for: {', '.join(insecure)}")
    if database.db is None:
        logger.warning("DATABASE_URL / DATABASE_NAME not set, content endpoints will return 503")
    elif config.SEED_ON_STARTUP:
        seed_all(database.db)
        logger.info("Startup seeding complete")
    yield


# ==================
# FastAPI app config
# ==================
app = FastAPI(title=config.APP_NAME, lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)


# ===============
# Error handling
# ===============
@app.exception_handler(PortfolioError)
async def portfolio_error_handler(request: Request, exc: PortfolioError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError.from_pydantic(exc)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.log_error_with_context(exc, context=f"{request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"message": "Server error", "code": "INTERNAL_ERROR", "details": {}},
    )


# ======
# Routes
# ======
app.include_router(auth_router)
app.include_router(portfolio_router)


@app.get("/")
def root():
    return {
        "message": "Portfolio Backend API",
        "status": "Running",
        "endpoints": {
            "health": "/api/health",
            "ping": "/ping",
            "auth": "/api/auth",
            "portfolio": "/api/portfolio",
        },
    }


@app.get("/health")
@app.get("/api/health")
def health():
    return {
        "status": "OK",
        "message": "Portfolio API is running",
        "database": "connected" if database.ping() else "not-available",
    }


@app.get("/ping", response_class=PlainTextResponse)
def ping():
    return "pong"


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
