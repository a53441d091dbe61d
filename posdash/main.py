import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from posdash import __version__
from posdash.api.routes import (
    auth,
    users,
    categories,
    sync,
    products,
    sales,
    expenses,
    day_end,
    employees,
)
from posdash.core.config import get_settings
from posdash.core.logging_config import setup_logging
from posdash.schemas.common import ErrorResponse

setup_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="POS Dashboard API",
    description="상품, 판매, 지출, 일 마감을 관리하는 POS 대시보드 백엔드 (Shopify 상품 동기화 포함)",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 모든 에러 응답은 {"success": false, "error": ...} 형태
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error="Validation failed", details=jsonable_encoder(exc.errors())
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True),
    )


# 라우터 등록 (sync는 products/{product_id}보다 먼저)
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(sync.router, prefix="/api/products/sync", tags=["product-sync"])
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(sales.router, prefix="/api/sales", tags=["sales"])
app.include_router(expenses.router, prefix="/api/expenses", tags=["expenses"])
app.include_router(day_end.router, prefix="/api/day-end", tags=["day-end"])
app.include_router(employees.router, prefix="/api/employees", tags=["employees"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "POS Dashboard API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
