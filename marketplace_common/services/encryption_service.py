# marketplace_common/services/encryption_service.py
import hmac
import secrets
from typing import Optional

from argon2 import Type
from argon2.low_level import hash_secret_raw

from marketplace_common.config.base import EncryptionConfig
from marketplace_common.models.user.model import User


class EncryptionService:
    """
    密码加密服务：生成随机盐，并以 Argon2id 计算盐值哈希。
    同一 (salt, password) 总是得到相同的 hash_pass，可用于登录校验。
    """

    def __init__(self, config: Optional[EncryptionConfig] = None):
        """初始化时注入加密配置，未传入时按环境变量/配置文件加载"""
        self.config = config or EncryptionConfig()

    def generate_salt(self) -> str:
        """生成十六进制随机盐（salt_len 字节）"""
        return secrets.token_hex(self.config.salt_len)

    def generate_hashed_password(self, salt: str, password: str) -> str:
        """
        计算盐值哈希
        :param salt: generate_salt() 生成的盐
        :param password: 明文密码
        :return: 十六进制哈希字符串
        """
        if not salt:
            raise ValueError("密码盐不能为空")
        if password is None:
            raise ValueError("密码不能为空")

        raw = hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            time_cost=self.config.time_cost,
            memory_cost=self.config.memory_cost,
            parallelism=self.config.parallelism,
            hash_len=self.config.hash_len,
            type=Type.ID,
        )
        return raw.hex()

    def verify_password(self, user: User, password: str) -> bool:
        """检查明文密码是否与用户的 (salt, hash_pass) 匹配"""
        if not user.salt or not user.hash_pass or not password:
            return False
        expected = self.generate_hashed_password(user.salt, password)
        return hmac.compare_digest(expected, user.hash_pass)
