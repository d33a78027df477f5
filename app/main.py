from typing import Iterable

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Table
import logging
import sys
import traceback

from app.core.config import settings
from app.db.base import init_db
from app.infrastructure.response import standard_response, validation_error_response

# 配置日志
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _field_name(loc) -> str:
    # loc 形如 ("body", "firstName") 或 ("path", "student_id")
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """请求参数校验失败统一返回400，data.errors 为 字段 -> 错误信息"""
    errors = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", "invalid value"))
    logger.info(f"请求参数校验失败 {request.method} {request.url.path}: {errors}")
    return validation_error_response(errors)


def create_app(title: str, router: APIRouter, tables: Iterable[Table]) -> FastAPI:
    """
    创建一个服务应用

    Args:
        title: 服务名称
        router: 该服务的API路由
        tables: 该服务拥有、启动时需要创建的表
    """
    tables = list(tables)
    app = FastAPI(
        title=title,
        version=VERSION,
    )

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=3600,
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # 包含API路由
    app.include_router(router, prefix=settings.API_V1_STR)

    @app.on_event("startup")
    async def startup_db_client():
        """
        应用启动时初始化数据库
        """
        logger.info(f"[{title}] 正在初始化数据库...")
        try:
            init_db(tables)
            logger.info("数据库初始化成功")
        except Exception as e:
            logger.error(f"数据库初始化失败: {str(e)}")
            logger.error(traceback.format_exc())
            logger.warning("应用将继续启动，但数据库功能可能不可用")

    @app.get("/")
    async def root():
        """健康检查接口"""
        return standard_response(
            data={
                "status": "online",
                "service": title,
                "version": VERSION
            },
            msg=f"{title} is running"
        )

    return app
