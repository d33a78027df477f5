import logging
from typing import Iterable, Optional

from sqlalchemy import create_engine, text, Table
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(uri: str):
    """
    根据连接串创建数据库引擎

    SQLite（测试环境使用）不支持连接池参数，内存库需要共享同一连接
    """
    url = make_url(uri)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(uri, **kwargs)

    return create_engine(
        uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=False
    )


# 创建数据库引擎
engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database() -> None:
    """MySQL下如果目标库不存在则先建库"""
    url = make_url(settings.SQLALCHEMY_DATABASE_URI)
    db_name = url.database
    server_engine = create_engine(url.set(database=None))
    try:
        with server_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        server_engine.dispose()


# 创建数据库和表
def init_db(tables: Optional[Iterable[Table]] = None):
    """
    初始化数据库，只创建当前服务拥有的表

    Args:
        tables: 需要创建的表，None 表示创建全部已注册的表
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    if engine.dialect.name == "mysql":
        _ensure_mysql_database()

    Base.metadata.create_all(bind=engine, tables=list(tables) if tables is not None else None)
    logger.info("所有表已创建或已存在")
