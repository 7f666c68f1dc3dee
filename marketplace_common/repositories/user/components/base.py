# marketplace_common/repositories/user/components/base.py
import asyncio
import math
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from marketplace_common.exceptions.store import StoreError
from marketplace_common.models.relations.user_advert import UserAdvert
from marketplace_common.models.relations.user_message import UserMessage
from marketplace_common.models.user.model import User
from marketplace_common.repositories.base_component import BaseComponent
from marketplace_common.utils.validators import validate_pagination


class UserBaseComponent(BaseComponent[User]):
    """用户基础查询组件：按ID/用户名读取、全量与分页读取、关联展开"""

    # ========== 关联展开 ==========
    async def populate(self, users: List[User]) -> List[User]:
        """
        展开用户的广告与消息关联（按 position 顺序），结果写入 user.adverts / user.messages
        :param users: 用户列表
        :return: 原列表（已展开）
        """
        if not users:
            return users

        user_ids = [user.id for user in users]
        advert_links = await UserAdvert.filter(user_id__in=user_ids).order_by("position").select_related("advert")
        message_links = await UserMessage.filter(user_id__in=user_ids).order_by("position").select_related("message")

        adverts: Dict[str, list] = defaultdict(list)
        for link in advert_links:
            adverts[str(link.user_id)].append(link.advert)

        messages: Dict[str, list] = defaultdict(list)
        for link in message_links:
            messages[str(link.user_id)].append(link.message)

        for user in users:
            user.adverts = adverts.get(str(user.id), [])
            user.messages = messages.get(str(user.id), [])
        return users

    # ========== 基础查询方法 ==========
    async def get_user_by_id(self, user_id: Any) -> Optional[User]:
        """根据ID获取用户（已展开关联），不存在返回None"""
        user = await self.get_by_id(user_id)
        if not user:
            return None
        await self.populate([user])
        return user

    async def find_by_username(self, username: str) -> List[User]:
        """根据用户名获取全部匹配用户（已展开关联）"""
        users = await self.query.filter(username=username)
        return await self.populate(list(users))

    async def all(self) -> List[User]:
        """按自然顺序获取全部用户（已展开关联）"""
        users = await self.query
        return await self.populate(list(users))

    async def all_users_with_pagination(self, page_number: int = 0, page_size: int = 5) -> Tuple[List[User], int]:
        """
        分页获取用户，页查询与总数查询并发执行，任一失败则整体失败
        :param page_number: 页码（从0开始）
        :param page_size: 每页数量
        :return: (当前页用户列表, 总页数)
        """
        validate_pagination(page_number, page_size)

        page_task = asyncio.ensure_future(self._fetch_page(page_number * page_size, page_size))
        count_task = asyncio.ensure_future(self.count())
        try:
            users, total = await asyncio.gather(page_task, count_task)
        except BaseException:
            # 任一查询失败时丢弃另一个查询的结果
            page_task.cancel()
            count_task.cancel()
            raise
        return users, math.ceil(total / page_size)

    async def _fetch_page(self, offset: int, limit: int) -> List[User]:
        users = await self.query.offset(offset).limit(limit)
        return await self.populate(list(users))

    async def get_all_usernames(self) -> List[str]:
        """按自然顺序获取全部用户名"""
        return list(await self.query.values_list("username", flat=True))

    # ========== 依赖读取（读后写场景） ==========
    async def get_instance(self, user_id: Any) -> User:
        """获取用户实例，不存在时抛出 StoreError"""
        user = await self.get_by_id(user_id)
        if not user:
            raise StoreError(f"用户ID {user_id} 不存在")
        return user

    async def get_instance_by_username(self, username: str) -> User:
        """按用户名获取第一个匹配的用户实例，不存在时抛出 StoreError"""
        user = await self.get_by_field("username", username)
        if not user:
            raise StoreError(f"用户名 {username} 不存在")
        return user
