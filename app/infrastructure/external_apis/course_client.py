"""课程服务（协作方）的 API 客户端。"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

import aiohttp
from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.infrastructure.exceptions import CourseServiceError
from app.schemas.course import CourseSummary

logger = logging.getLogger(__name__)

_summary_list = TypeAdapter(List[CourseSummary])


class ServiceResolver(Protocol):
    """把逻辑服务名解析为可访问的基础地址"""

    def resolve(self, service_name: str) -> str:
        ...


class StaticServiceResolver:
    """
    基于配置的地址解析器

    服务发现由外部负责，这里只保存已解析好的 服务名 -> 基础地址 映射
    """

    def __init__(self, addresses: Optional[Dict[str, str]] = None):
        self.addresses = dict(addresses or {settings.COURSE_SERVICE_NAME: settings.COURSE_SERVICE_URL})

    def resolve(self, service_name: str) -> str:
        try:
            return self.addresses[service_name].rstrip("/")
        except KeyError:
            raise CourseServiceError(f"无法解析服务地址: {service_name}")


class CourseLookupClient:
    """
    调用课程服务的批量查询端点 POST {"courseIds": [...]}

    任何失败（网络错误、超时、非200状态、响应格式错误）都以 CourseServiceError 抛出，
    是否容忍由调用方决定。
    """

    def __init__(
        self,
        resolver: Optional[ServiceResolver] = None,
        service_name: Optional[str] = None,
        lookup_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.resolver = resolver or StaticServiceResolver()
        self.service_name = service_name or settings.COURSE_SERVICE_NAME
        self.lookup_path = lookup_path or settings.COURSE_LOOKUP_PATH
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.COURSE_SERVICE_TIMEOUT)

    def _lookup_url(self) -> str:
        return f"{self.resolver.resolve(self.service_name)}{self.lookup_path}"

    async def _post(self, url: str, payload: Dict[str, Any]) -> Any:
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.post(url, json=payload) as response:
                if response.status != 200:
                    body = await response.text()
                    raise CourseServiceError(
                        f"课程服务返回异常状态 {response.status}: {body[:200]}",
                        status=response.status,
                    )
                return await response.json(content_type=None)

    async def resolve(self, course_ids: Iterable[int]) -> List[CourseSummary]:
        """
        查询给定ID集合中当前存在的课程

        Args:
            course_ids: 课程ID集合

        Returns:
            List[CourseSummary]: 存在的课程摘要，可能是请求集合的真子集

        Raises:
            CourseServiceError: 调用失败
        """
        requested = set(course_ids)
        url = self._lookup_url()
        payload = {"courseIds": sorted(requested)}
        logger.debug(f"课程查询请求: POST {url} {payload}")

        try:
            body = await self._post(url, payload)
        except CourseServiceError:
            raise
        except asyncio.TimeoutError as e:
            raise CourseServiceError(f"课程服务请求超时: {url}") from e
        except aiohttp.ClientError as e:
            raise CourseServiceError(f"无法访问课程服务 {url}: {e}") from e
        except ValueError as e:
            raise CourseServiceError(f"课程服务响应不是合法JSON: {e}") from e

        try:
            summaries = _summary_list.validate_python(body)
        except ValidationError as e:
            raise CourseServiceError(f"课程服务响应格式错误: {e.error_count()} 处不合法") from e

        unexpected = [s.id for s in summaries if s.id not in requested]
        if unexpected:
            logger.warning(f"课程服务返回了未请求的课程ID，已忽略: {unexpected}")
            summaries = [s for s in summaries if s.id in requested]

        return summaries
