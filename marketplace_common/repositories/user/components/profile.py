# marketplace_common/repositories/user/components/profile.py
import logging
from typing import Any, Dict, Union

from marketplace_common.models.user.model import User
from marketplace_common.repositories.base_component import BaseComponent
from marketplace_common.schemas.user import UserCreate, UserSettings

logger = logging.getLogger(__name__)


class UserProfileComponent(BaseComponent[User]):
    """用户资料组件：创建用户与资料字段更新"""

    async def create(self, options: Union[UserCreate, Dict[str, Any]]) -> User:
        """
        创建用户：生成盐与盐值哈希，保存用户并关联初始消息/广告
        :param options: UserCreate 或等价字典（支持 camelCase 字段名）
        :return: 已保存且已展开关联的用户
        """
        if not isinstance(options, UserCreate):
            options = UserCreate(**options)

        encryption = self.repository.encryption_service
        salt = encryption.generate_salt()
        hash_pass = encryption.generate_hashed_password(salt, options.password)

        async with self.transaction():
            user = self.model(
                username=options.username,
                email=options.email,
                picture_url=options.picture_url,
                phone_number=options.phone_number,
                salt=salt,
                hash_pass=hash_pass,
                password=options.password if encryption.config.store_plain_password else None,
            )
            await user.save()

            for message in options.messages:
                await self.repository.relation.link_message(user, message)
            for advert in options.adverts:
                await self.repository.relation.link_advert(user, advert)

        logger.info(f"创建用户成功: {user.username} ({user.id})")
        await self.repository.base.populate([user])
        return user

    async def update_user_image(self, user: Union[User, Any], new_image_url: str) -> int:
        """按ID直接更新头像，返回受影响行数"""
        return await self.model.filter(id=self._get_id(user)).update(picture_url=new_image_url)

    async def update_user_phone_number(self, user: Union[User, Any], new_phone_number: str) -> int:
        """按ID直接更新电话号码，返回受影响行数"""
        return await self.model.filter(id=self._get_id(user)).update(phone_number=new_phone_number)

    async def update_user(self, user_id: Any, settings: Union[UserSettings, Dict[str, Any]]) -> User:
        """
        更新用户资料：email / phone_number / picture_url 仅在提供非空值时覆盖，空值保留原值
        :param user_id: 用户ID
        :param settings: UserSettings 或等价字典
        :return: 更新后的用户
        """
        if not isinstance(settings, UserSettings):
            settings = UserSettings(**(settings or {}))

        user = await self.repository.base.get_instance(user_id)
        user.email = settings.email or user.email
        user.phone_number = settings.phone_number or user.phone_number
        user.picture_url = settings.picture_url or user.picture_url
        await user.save()

        await self.repository.base.populate([user])
        return user

    def _get_id(self, user: Union[User, Any]) -> Any:
        """兼容传入用户实例或用户ID"""
        return user.id if isinstance(user, self.model) else user
