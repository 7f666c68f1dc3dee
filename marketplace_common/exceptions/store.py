# marketplace_common/exceptions/store.py
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tortoise.exceptions import BaseORMException

R = TypeVar("R")


class StoreError(Exception):
    """存储层统一异常：查询/写入失败、数据校验失败、依赖记录不存在"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        cause_name = type(self.cause).__name__ if self.cause else None
        return f"StoreError(message={self.message!r}, cause={cause_name})"


def translate_store_errors(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
    """
    将 Tortoise ORM 异常（BaseORMException 及其子类，如 IntegrityError、OperationalError、
    ValidationError、DoesNotExist）统一转换为 StoreError；其他异常原样抛出
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> R:
        try:
            return await func(*args, **kwargs)
        except BaseORMException as exc:
            raise StoreError(f"{func.__name__} 执行失败: {exc}", cause=exc) from exc

    return wrapper
