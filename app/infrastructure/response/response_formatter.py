from typing import Any, Dict, List, Optional, Union

from fastapi.responses import JSONResponse

from app.services.errors import ServiceError


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "success",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，默认200表示成功
        msg: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def error_response(
    msg: str = "request failed",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: 错误状态码，默认400表示客户端错误
        data: 可选的错误详情数据

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(data=data, code=code, msg=msg)


def service_error_response(error: ServiceError) -> JSONResponse:
    """
    将服务层错误转换为带对应HTTP状态码的JSON响应
    """
    return JSONResponse(
        status_code=error.status_code,
        content=error_response(msg=error.message, code=error.status_code, data=error.detail),
    )


def validation_error_response(errors: Dict[str, str]) -> JSONResponse:
    """
    请求体字段校验失败的响应，data.errors 为 字段名 -> 错误信息
    """
    return JSONResponse(
        status_code=400,
        content=error_response(msg="Validation failed", code=400, data={"errors": errors}),
    )
