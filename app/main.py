
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app import config
from app.database import engine, Base
from app.errors import CouponApiError, MalformedRequestError
from app.logging_config import configure_logging
from app.models import application as application_model  # noqa: F401
from app.models import coupon as coupon_model  # noqa: F401
from app.routers import coupons as coupons_router

configure_logging(config.LOG_LEVEL, config.LOG_JSON)

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Coupon Verification API",
    description="Validates coupons against orders for registered applications and returns the deducted order total",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(coupons_router.router)


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.exception_handler(CouponApiError)
async def coupon_api_error_handler(request: Request, exc: CouponApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


# Structural problems in the body/params are a 400, not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    err = MalformedRequestError(errors=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=err.status_code, content=err.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "code": "ERR_HTTP", "message": str(exc.detail)},
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
