"""
Unit tests for field validators.
"""

import pytest
from tortoise.exceptions import ValidationError

from marketplace_common.utils.validators import (
    validate_email,
    validate_pagination,
    validate_phone_number,
    validate_url,
)


@pytest.mark.parametrize("value", ["a@x.com", "first.last+tag@mail.example.org", "", None])
def test_validate_email_accepts(value):
    validate_email(value)


@pytest.mark.parametrize("value", ["plain", "a@b", "@example.com"])
def test_validate_email_rejects(value):
    with pytest.raises(ValidationError):
        validate_email(value)


@pytest.mark.parametrize("value", ["https://cdn.example.com/a.png", "http://localhost:8080/x", ""])
def test_validate_url_accepts(value):
    validate_url(value)


@pytest.mark.parametrize("value", ["ftp://example.com/a", "example.com/a.png", "https://"])
def test_validate_url_rejects(value):
    with pytest.raises(ValidationError):
        validate_url(value)


@pytest.mark.parametrize("value", ["0888123456", "+359 888 123 456", "(02) 123-4567", ""])
def test_validate_phone_number_accepts(value):
    validate_phone_number(value)


@pytest.mark.parametrize("value", ["12345", "phone", "+359-abc-123"])
def test_validate_phone_number_rejects(value):
    with pytest.raises(ValidationError):
        validate_phone_number(value)


def test_validate_pagination():
    validate_pagination(0, 5)
    validate_pagination(10, 1000)

    with pytest.raises(ValueError):
        validate_pagination(-1, 5)
    with pytest.raises(ValueError):
        validate_pagination(0, 0)
    with pytest.raises(ValueError):
        validate_pagination(0, 101, max_page_size=100)
