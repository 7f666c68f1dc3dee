# marketplace_common/repositories/base_component.py
from contextlib import asynccontextmanager
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class BaseComponent(Generic[T]):
    """组件基类 - 提供基础功能和常用方法代理"""

    def __init__(self, repository):
        self.repository = repository
        self.model = repository.model

    @property
    def query(self):
        """获取基础查询（已按自然顺序排序）"""
        return self.repository.get_query()

    # ========== 事务管理 ==========

    @asynccontextmanager
    async def transaction(self):
        """获取事务上下文"""
        async with self.repository.transaction() as transaction:
            yield transaction

    # ========== 基础查询方法 ==========

    async def get_by_field(self, field: str, value: Any) -> Optional[T]:
        """根据字段值获取第一条记录"""
        return await self.query.filter(**{field: value}).first()

    # ========== 代理常用Repository方法 ==========

    async def get_by_id(self, id: str) -> Optional[T]:
        return await self.repository.get_by_id(id)

    async def count(self, **filters) -> int:
        return await self.repository.count(**filters)
