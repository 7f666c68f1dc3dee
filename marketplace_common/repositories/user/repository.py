# marketplace_common/repositories/user/repository.py
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from marketplace_common.exceptions.store import translate_store_errors
from marketplace_common.models.user.model import User
from marketplace_common.repositories.base_repository import BaseRepository
from marketplace_common.schemas.user import UserCreate, UserSettings
from marketplace_common.services.encryption_service import EncryptionService
from .components import UserBaseComponent, UserProfileComponent, UserRelationComponent
from .components.relation import AdvertRef, MessageRef


class UserRepository(BaseRepository[User]):
    """
    用户数据访问层。
    所有公开方法均为协程，ORM 异常统一转换为 StoreError；读取不到的记录返回 None/空列表。
    """

    def __init__(self, model: Type[User] = User, encryption_service: Optional[EncryptionService] = None):
        super().__init__(model)
        self.encryption_service = encryption_service or EncryptionService()
        self._base = UserBaseComponent(self)
        self._profile = UserProfileComponent(self)
        self._relation = UserRelationComponent(self)

    # ========== 属性路由 ==========
    @property
    def base(self) -> UserBaseComponent:
        """基础查询操作"""
        return self._base

    @property
    def profile(self) -> UserProfileComponent:
        """创建与资料更新操作"""
        return self._profile

    @property
    def relation(self) -> UserRelationComponent:
        """广告/消息关联操作"""
        return self._relation

    # ========== 创建 ==========
    @translate_store_errors
    async def create(self, options: Union[UserCreate, Dict[str, Any]]) -> User:
        return await self._profile.create(options)

    # ========== 查询 ==========
    @translate_store_errors
    async def get_user_by_id(self, user_id: Any) -> Optional[User]:
        return await self._base.get_user_by_id(user_id)

    @translate_store_errors
    async def find_by_username(self, username: str) -> List[User]:
        return await self._base.find_by_username(username)

    @translate_store_errors
    async def all(self) -> List[User]:
        return await self._base.all()

    @translate_store_errors
    async def all_users_with_pagination(self, page_number: int = 0, page_size: int = 5) -> Tuple[List[User], int]:
        return await self._base.all_users_with_pagination(page_number, page_size)

    @translate_store_errors
    async def get_all_usernames(self) -> List[str]:
        return await self._base.get_all_usernames()

    # ========== 更新 ==========
    @translate_store_errors
    async def update_user_image(self, user: Union[User, Any], new_image_url: str) -> int:
        return await self._profile.update_user_image(user, new_image_url)

    @translate_store_errors
    async def update_user_phone_number(self, user: Union[User, Any], new_phone_number: str) -> int:
        return await self._profile.update_user_phone_number(user, new_phone_number)

    @translate_store_errors
    async def update_user(self, user_id: Any, settings: Union[UserSettings, Dict[str, Any]]) -> User:
        return await self._profile.update_user(user_id, settings)

    # ========== 关联追加 ==========
    @translate_store_errors
    async def add_advert(self, user_id: Any, advert: AdvertRef) -> User:
        return await self._relation.add_advert(user_id, advert)

    @translate_store_errors
    async def add_message(self, username: str, message: MessageRef) -> User:
        return await self._relation.add_message(username, message)
