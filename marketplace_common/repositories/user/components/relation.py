# marketplace_common/repositories/user/components/relation.py
import logging
from typing import Any, Dict, Type, Union
from uuid import UUID

from pydantic import BaseModel as PydanticModel

from marketplace_common.models.advert.model import Advert
from marketplace_common.models.base import BaseModel
from marketplace_common.models.message.model import Message
from marketplace_common.models.relations.user_advert import UserAdvert
from marketplace_common.models.relations.user_message import UserMessage
from marketplace_common.models.user.model import User
from marketplace_common.repositories.base_component import BaseComponent
from marketplace_common.schemas.advert import AdvertCreate
from marketplace_common.schemas.message import MessageCreate

logger = logging.getLogger(__name__)

AdvertRef = Union[Advert, AdvertCreate, Dict[str, Any], UUID, str]
MessageRef = Union[Message, MessageCreate, Dict[str, Any], UUID, str]


class UserRelationComponent(BaseComponent[User]):
    """用户关联组件：向用户的广告/消息列表追加引用（只追加，不删除）"""

    async def link_advert(self, user: User, advert: AdvertRef) -> Advert:
        """在用户广告列表末尾追加一条引用"""
        advert_obj = await self._resolve(Advert, AdvertCreate, advert)
        position = await UserAdvert.filter(user_id=user.id).count()
        await UserAdvert.create(user=user, advert=advert_obj, position=position)
        return advert_obj

    async def link_message(self, user: User, message: MessageRef) -> Message:
        """在用户消息列表末尾追加一条引用"""
        message_obj = await self._resolve(Message, MessageCreate, message)
        position = await UserMessage.filter(user_id=user.id).count()
        await UserMessage.create(user=user, message=message_obj, position=position)
        return message_obj

    async def add_advert(self, user_id: Any, advert: AdvertRef) -> User:
        """
        读取用户后追加广告并保存（读后写，无并发隔离）
        :param user_id: 用户ID
        :param advert: 广告实例 / 广告ID / 广告字段字典
        :return: 更新后的用户
        """
        async with self.transaction():
            user = await self.repository.base.get_instance(user_id)
            advert_obj = await self.link_advert(user, advert)
            await user.save()
        logger.debug(f"用户 {user.id} 追加广告 {advert_obj.id}")
        await self.repository.base.populate([user])
        return user

    async def add_message(self, username: str, message: MessageRef) -> User:
        """
        按用户名读取用户后追加消息并保存（读后写，无并发隔离）
        :param username: 用户名（多个同名用户时取自然顺序第一个）
        :param message: 消息实例 / 消息ID / 消息字段字典
        :return: 更新后的用户
        """
        async with self.transaction():
            user = await self.repository.base.get_instance_by_username(username)
            message_obj = await self.link_message(user, message)
            await user.save()
        logger.debug(f"用户 {username} 追加消息 {message_obj.id}")
        await self.repository.base.populate([user])
        return user

    # ========== 辅助方法 ==========
    @staticmethod
    async def _resolve(model: Type[BaseModel], schema: Type[PydanticModel], value: Any) -> BaseModel:
        """将模型实例/输入字典/ID 统一解析为已持久化的模型实例"""
        if isinstance(value, model):
            if not value._saved_in_db:
                await value.save()
            return value

        if isinstance(value, dict):
            value = schema(**value)
        if isinstance(value, schema):
            return await model.create(**value.model_dump(exclude_none=True))

        return await model.get(id=value)
