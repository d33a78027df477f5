#!/usr/bin/env python3
import uvicorn
import logging
import os
import sys
from datetime import datetime
from app.core.config import settings

SERVICES = {
    "student": "app.student_main:app",
    "course": "app.course_main:app",
}

# 用法: python run.py [student|course]，缺省取 SERVICE_NAME 配置
service = sys.argv[1] if len(sys.argv) > 1 else settings.SERVICE_NAME
if service not in SERVICES:
    sys.exit(f"未知服务: {service}，可选: {', '.join(SERVICES)}")

# 创建logs目录（如果不存在）
log_dir = settings.LOG_DIR
if not os.path.exists(log_dir):
    os.makedirs(log_dir)

# 配置日志
logger = logging.getLogger()
logger.setLevel(settings.LOG_LEVEL)

# 创建控制台处理器
console_handler = logging.StreamHandler()
console_handler.setLevel(settings.LOG_LEVEL)

# 创建文件处理器，按服务和启动时间生成日志文件
log_filename = os.path.join(log_dir, f"{service}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
file_handler = logging.FileHandler(log_filename, encoding='utf-8')
file_handler.setLevel(settings.LOG_LEVEL)

# 创建格式器
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)
file_handler.setFormatter(formatter)

# 清除可能已存在的处理器，然后添加新的处理器
logger.handlers = []
logger.addHandler(console_handler)
logger.addHandler(file_handler)


if __name__ == "__main__":
    logger.info(f"启动{service}服务 - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"日志文件路径: {log_filename}")
    uvicorn.run(SERVICES[service], host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
