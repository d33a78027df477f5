import os
import json
from typing import Annotated, List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Enrollment"
    # 当前进程承载的服务：student 或 course
    SERVICE_NAME: str = "student"

    # CORS 设置，环境变量可写成JSON数组或逗号分隔字符串，由下面的校验器统一解析
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 优先按JSON数组解析
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # 否则按逗号分隔
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "student_db"

    # 显式指定的数据库连接串，优先级高于上面的分项配置
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        # 默认使用MySQL
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 课程服务（协作方）配置
    COURSE_SERVICE_NAME: str = "course-service"
    COURSE_SERVICE_URL: str = "http://localhost:8081"
    COURSE_LOOKUP_PATH: str = "/api/courses/byIds"
    # 调用课程服务的总超时时间（秒）
    COURSE_SERVICE_TIMEOUT: float = 5.0

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8082
    RELOAD: bool = False

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


# 创建设置实例
settings = Settings()
