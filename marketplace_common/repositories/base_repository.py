# marketplace_common/repositories/base_repository.py
from contextlib import asynccontextmanager
from typing import Generic, Optional, Sequence, Type, TypeVar

from tortoise.queryset import QuerySet
from tortoise.transactions import in_transaction

from marketplace_common.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class IRepository(Generic[T]):
    """Repository 接口定义"""

    async def get_by_id(self, id: str) -> Optional[T]:
        raise NotImplementedError

    async def count(self, **filters) -> int:
        raise NotImplementedError


class BaseRepository(IRepository[T]):
    def __init__(self, model: Type[T]):
        self.model = model
        # 自然顺序：创建时间 + UUIDv7 主键，保证分页结果稳定
        self.default_order_by: Sequence[str] = ("created_at", "id")

    async def get_by_id(self, id: str) -> Optional[T]:
        """根据ID获取单个记录"""
        return await self.model.get_or_none(id=id)

    async def count(self, **filters) -> int:
        """统计记录数量"""
        return await self.model.filter(**filters).count()

    @asynccontextmanager
    async def transaction(self):
        """事务管理器"""
        async with in_transaction() as transaction:
            yield transaction

    def get_query(self) -> QuerySet[T]:
        """获取按自然顺序排序的基础查询对象"""
        return self.model.all().order_by(*self.default_order_by)
