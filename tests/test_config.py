"""
Unit tests for the YAML + environment configuration layer.
"""

import pytest

from marketplace_common.config import BaseConfig, EncryptionConfig, LoggingConfig, TortoiseConfig


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
    (tmp_path / "configs").mkdir()
    return tmp_path


def write_config(project_root, name, content):
    (project_root / "configs" / name).write_text(content, encoding="utf-8")


def test_tortoise_config_with_db_url(project_root):
    orm = TortoiseConfig(db_url="sqlite://:memory:").get_tortoise_orm()

    assert orm["connections"] == {"default": "sqlite://:memory:"}
    assert orm["apps"]["models"]["models"] == ["marketplace_common.models"]
    assert orm["apps"]["models"]["default_connection"] == "default"


def test_tortoise_config_with_credentials(project_root):
    config = TortoiseConfig(additional_models="app.models.orders, app.models.payments")
    orm = config.get_tortoise_orm()

    connection = orm["connections"]["default"]
    assert connection["engine"] == "tortoise.backends.mysql"
    assert connection["credentials"]["host"] == "localhost"
    assert connection["credentials"]["port"] == 3306
    assert orm["apps"]["models"]["models"] == [
        "marketplace_common.models",
        "app.models.orders",
        "app.models.payments",
    ]


def test_yaml_values_are_loaded(project_root):
    write_config(
        project_root,
        "app.yaml",
        "tortoise:\n  master:\n    host: db.internal\n    port: 3307\nencryption:\n  time_cost: 3\n",
    )

    assert TortoiseConfig().master.host == "db.internal"
    assert TortoiseConfig().master.port == 3307
    assert EncryptionConfig().time_cost == 3


def test_yaml_files_are_merged_in_name_order(project_root):
    write_config(project_root, "a.yaml", "encryption:\n  time_cost: 3\n  hash_len: 48\n")
    write_config(project_root, "b.yml", "encryption:\n  time_cost: 5\n")

    config = EncryptionConfig()

    assert config.time_cost == 5
    assert config.hash_len == 48


def test_env_and_arguments_override_yaml(project_root, monkeypatch):
    write_config(project_root, "app.yaml", "encryption:\n  time_cost: 3\n  salt_len: 24\n")
    monkeypatch.setenv("ENCRYPTION_TIME_COST", "4")

    assert EncryptionConfig().time_cost == 4
    assert EncryptionConfig().salt_len == 24
    assert EncryptionConfig(time_cost=6).time_cost == 6


def test_invalid_yaml_is_ignored(project_root):
    write_config(project_root, "broken.yaml", "encryption: [unclosed\n")

    assert EncryptionConfig().time_cost == 2


def test_encryption_config_rejects_bad_argon2_params(project_root):
    with pytest.raises(ValueError):
        EncryptionConfig(memory_cost=8, parallelism=2)
    with pytest.raises(ValueError):
        EncryptionConfig(salt_len=4)


def test_logging_config_level(project_root):
    assert LoggingConfig(level="debug").level == "DEBUG"
    with pytest.raises(ValueError):
        LoggingConfig(level="verbose")


def test_logging_config_resolves_path_against_project_root(project_root):
    config = LoggingConfig(service_path="logs/service.log")

    assert config.service_path == str(project_root / "logs" / "service.log")


def test_base_config_aggregates_sections(project_root):
    config = BaseConfig()

    assert config.get_project_root() == str(project_root)
    assert isinstance(config.tortoise, TortoiseConfig)
    assert isinstance(config.encryption, EncryptionConfig)
    assert isinstance(config.logging, LoggingConfig)
    assert config.encryption.store_plain_password is False
