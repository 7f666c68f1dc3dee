# marketplace_common/utils/validators.py
import re
from typing import Optional

from tortoise.exceptions import ValidationError


# 验证邮箱格式
def validate_email(value: str):
    """邮箱格式验证"""
    if not value:
        return

    if not re.match(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\.[a-zA-Z]{2,}$",
        value,
    ):
        raise ValidationError(f"邮箱格式无效，请输入正确的邮箱地址：{value}")


# 验证url格式
def validate_url(value: str) -> None:
    """URL格式验证，空值视为未设置"""
    if not value:
        return

    url_pattern = re.compile(
        r"^https?://"
        r"(?:(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+"
        r"[a-zA-Z]{2,}|"
        r"localhost|"
        r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"
        r"(?::\d{1,5})?"
        r"(?:/[^\s]*)?"
        r"$",
        re.IGNORECASE,
    )

    if not url_pattern.match(value):
        raise ValidationError(f"URL格式无效，需以http/https开头：{value}")


# 验证电话号码格式
def validate_phone_number(value: str):
    """电话号码验证：可选的+前缀，6-20位数字，允许空格、中划线与括号分隔"""
    if not value:
        return

    digits = re.sub(r"[\s\-()]", "", value)
    if not re.match(r"^\+?\d{6,20}$", digits):
        raise ValidationError(f"电话号码格式无效：{value}")


# 验证分页参数
def validate_pagination(page_number: int, page_size: int, max_page_size: Optional[int] = None):
    """分页参数验证（页码从0开始，max_page_size为None时不限制每页上限）"""
    if page_number < 0:
        raise ValueError("页码无效，应大于等于0")

    if page_size < 1:
        raise ValueError("每页数量无效，应为大于等于1的整数")

    if max_page_size is not None and page_size > max_page_size:
        raise ValueError(f"每页数量无效，应为1到{max_page_size}之间的整数")
