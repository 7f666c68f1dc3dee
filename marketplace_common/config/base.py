# marketplace_common/config/base.py
import os
import logging
import threading
import yaml
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional
from pydantic import BaseModel, Field, model_validator, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

from marketplace_common.models.types.constants import MODEL_MODULES, PUBLIC_APP_LABEL

logger = logging.getLogger(__name__)


class CustomBaseConfig(PydanticBaseSettings):
    """
    自定义配置基类：
    1. 支持从 YAML 文件加载配置
    2. 环境变量可覆盖文件中的配置项
    优先级：构造参数 > 环境变量 > 配置文件 > 类默认值
    """

    # 配置类静态字段（需子类覆盖）
    config_key: ClassVar[Optional[str]] = None
    config_dir: ClassVar[str] = "configs"
    _config_cache: ClassVar[Dict[Path, dict]] = {}
    _cache_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_project_root(cls) -> Path:
        """
        获取项目根目录
        优先级：PROJECT_ROOT环境变量 > 工作目录(CWD)
        """
        env_root = os.getenv("PROJECT_ROOT")
        if env_root:
            try:
                root_path = Path(env_root).resolve()
            except OSError as e:
                raise ValueError(f"PROJECT_ROOT路径解析失败: {env_root} - {e}")
            if root_path.is_dir():
                logger.debug(f"通过环境变量获取项目根: {root_path}")
                return root_path
            raise NotADirectoryError(f"PROJECT_ROOT={env_root} 不是有效目录")

        cwd = Path(os.getcwd()).resolve()
        logger.debug(f"通过工作目录(CWD)获取项目根: {cwd}")
        return cwd

    @classmethod
    def clear_cache(cls) -> None:
        """清空已加载的YAML配置缓存（切换PROJECT_ROOT后需调用）"""
        with cls._cache_lock:
            cls._config_cache.clear()

    @staticmethod
    def merge_yaml(base_yaml: dict, config_yaml: dict) -> dict:
        merged = base_yaml.copy()
        for key, value in config_yaml.items():
            if key in merged:
                if isinstance(merged[key], dict) and isinstance(value, dict):
                    merged[key] = CustomBaseConfig.merge_yaml(merged[key], value)
                elif isinstance(merged[key], list) and isinstance(value, list):
                    # 合并列表，避免重复项
                    merged[key] = list({item: None for item in merged[key] + value}.keys())
                else:
                    merged[key] = value
            else:
                merged[key] = value
        return merged

    @staticmethod
    def merge_env(base: Dict, update: Dict) -> Dict:
        merged = base.copy()
        for key, value in update.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = CustomBaseConfig.merge_env(merged[key], value)
            else:
                merged[key] = value
        return merged

    @model_validator(mode="before")
    @classmethod
    def load_configs_from_dir(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        try:
            config_dir = (cls.get_project_root() / cls.config_dir).resolve()

            # 线程安全的缓存加载
            with cls._cache_lock:
                if config_dir not in cls._config_cache:
                    cls._config_cache[config_dir] = cls._load_and_merge_configs(config_dir)
                env_config = cls._config_cache[config_dir]

            config_key = cls.config_key or cls.__name__.lower()
            config_section = env_config.get(config_key, {})

            # 合并优先级：环境变量/构造参数(values) > 配置文件(config_section)
            return cls.merge_env(config_section, values)
        except Exception as e:
            logger.error(f"加载配置失败: {e}", exc_info=True)
            return values

    @classmethod
    def _load_and_merge_configs(cls, config_dir: Path) -> dict:
        """加载并合并目录下所有YAML配置文件"""
        env_config = {}
        if not config_dir.is_dir():
            logger.debug(f"配置目录不存在: {config_dir}")
            return env_config

        # 按文件名排序加载（保证加载顺序）
        config_files = sorted(
            [f for f in config_dir.iterdir() if f.suffix in (".yaml", ".yml")],
            key=lambda x: x.name,
        )
        for config_file in config_files:
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
                    env_config = cls.merge_yaml(env_config, file_config)
                logger.debug(f"成功加载配置文件: {config_file}")
            except yaml.YAMLError as e:
                logger.error(f"解析YAML文件失败 {config_file}: {e}", exc_info=True)
            except PermissionError as e:
                logger.error(f"无权限读取配置文件 {config_file}: {e}", exc_info=True)
        return env_config

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="APP_",
        env_nested_delimiter="__",  # 使用双下划线表示嵌套字段，例如 TORTOISE_MASTER__HOST 对应 master.host
        case_sensitive=False,
    )


class DatabaseConfig(BaseModel):
    host: str = "localhost"
    port: int = 3306
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (1 <= v <= 65535):
            raise ValueError(f"Database port {v} is invalid (must be 1-65535)")
        return v


class TortoiseConfig(CustomBaseConfig):
    """
    Tortoise ORM 配置类。
    db_url 非空时直接使用连接串（如 sqlite://:memory:），否则按 engine + master 凭证拼装连接配置。
    """

    config_key = "tortoise"
    db_url: Optional[str] = None
    engine: str = "tortoise.backends.mysql"
    min_connections: int = 1
    max_connections: int = 5
    use_tz: bool = False
    timezone: str = "UTC"
    additional_models: str = ""

    master: DatabaseConfig = Field(default_factory=DatabaseConfig)

    def get_connection(self) -> Any:
        """生成默认连接配置（连接串或凭证字典）"""
        if self.db_url:
            return self.db_url
        return {
            "engine": self.engine,
            "credentials": {
                "host": self.master.host,
                "port": self.master.port,
                "user": self.master.user,
                "password": self.master.password,
                "database": self.master.database,
                "minsize": self.min_connections,
                "maxsize": self.max_connections,
            },
        }

    def get_tortoise_orm(self) -> dict:
        """
        生成 Tortoise ORM 配置字典，包括数据库连接配置和模型配置。

        :return: Tortoise ORM 配置字典
        """
        extra_models = [item.strip() for item in self.additional_models.split(",") if item.strip()]
        return {
            "connections": {"default": self.get_connection()},
            "apps": {
                PUBLIC_APP_LABEL: {
                    "models": list(MODEL_MODULES) + extra_models,
                    "default_connection": "default",
                }
            },
            "use_tz": self.use_tz,
            "timezone": self.timezone,
        }

    # 支持 TORTOISE_MASTER__HOST 格式的环境变量
    model_config = SettingsConfigDict(env_prefix="TORTOISE_")


class EncryptionConfig(CustomBaseConfig):
    """
    密码加密配置类（Argon2id 参数）。
    store_plain_password 为 True 时会同时持久化明文密码，仅用于兼容旧数据。
    """

    config_key = "encryption"
    time_cost: int = 2  # 迭代次数
    memory_cost: int = 102400  # 内存使用（KB）
    parallelism: int = 8  # 并行线程数
    hash_len: int = 32  # 哈希长度
    salt_len: int = 16  # 盐长度（字节）
    store_plain_password: bool = False

    @model_validator(mode="after")
    def validate_argon2_params(self) -> "EncryptionConfig":
        if self.time_cost < 1:
            raise ValueError(f"time_cost 必须大于等于1，当前值: {self.time_cost}")
        if self.parallelism < 1:
            raise ValueError(f"parallelism 必须大于等于1，当前值: {self.parallelism}")
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError(f"memory_cost 不能小于 8 * parallelism（{8 * self.parallelism}），当前值: {self.memory_cost}")
        if self.hash_len < 4:
            raise ValueError(f"hash_len 必须大于等于4，当前值: {self.hash_len}")
        if self.salt_len < 8:
            raise ValueError(f"salt_len 必须大于等于8，当前值: {self.salt_len}")
        return self

    model_config = SettingsConfigDict(env_prefix="ENCRYPTION_")


class LoggingConfig(CustomBaseConfig):
    """
    日志配置类，定义日志的存储路径、日志级别、日志格式、日志轮换时间间隔、保留的备份文件数量。
    """

    config_key = "logging"
    service_path: Optional[str] = None
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    interval: int = 1  # 日志轮换时间间隔，单位为天
    backup_count: int = 7  # 保留的备份文件数量

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed_levels: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"日志级别仅支持 {allowed_levels}，当前值: {v}")
        return v.upper()

    def __init__(self, **data):
        super().__init__(**data)
        if self.service_path:
            self.service_path = str(self.get_project_root() / self.service_path)

    model_config = SettingsConfigDict(env_prefix="LOGGING_")


class BaseConfig:
    """
    BaseConfig 负责初始化数据访问层的全部配置项：数据库、密码加密与日志。
    """

    def __init__(self):
        self.project_root: Path = CustomBaseConfig.get_project_root()

        # Tortoise ORM 数据库配置，包括连接信息和模型模块
        self.tortoise = TortoiseConfig()

        # 密码加密配置，包括 Argon2 参数与明文密码保存开关
        self.encryption = EncryptionConfig()

        # 日志配置，包括日志级别、格式、文件路径与轮换策略
        self.logging = LoggingConfig()

    def get_project_root(self) -> str:
        return str(self.project_root)
