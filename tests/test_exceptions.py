"""
Unit tests for ORM error translation.
"""

import pytest
from tortoise.exceptions import DoesNotExist, IntegrityError

from marketplace_common.exceptions import StoreError, translate_store_errors


@translate_store_errors
async def raise_integrity_error():
    raise IntegrityError("duplicate key")


@translate_store_errors
async def raise_key_error():
    raise KeyError("not an orm error")


@translate_store_errors
async def return_value(value):
    return value


@pytest.mark.asyncio
async def test_orm_errors_become_store_errors():
    with pytest.raises(StoreError) as exc_info:
        await raise_integrity_error()

    error = exc_info.value
    assert isinstance(error.cause, IntegrityError)
    assert error.__cause__ is error.cause
    assert "raise_integrity_error" in error.message


@pytest.mark.asyncio
async def test_other_errors_propagate_unchanged():
    with pytest.raises(KeyError):
        await raise_key_error()


@pytest.mark.asyncio
async def test_results_pass_through():
    assert await return_value(42) == 42
    assert return_value.__name__ == "return_value"


def test_store_error_repr():
    error = StoreError("boom", cause=DoesNotExist("missing"))

    assert str(error) == "boom"
    assert "DoesNotExist" in repr(error)
