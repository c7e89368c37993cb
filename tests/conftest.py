"""Shared test fixtures."""

from __future__ import annotations

import pytest

from littleorigins.config import Settings
from littleorigins.db import Database
from littleorigins.models.account import IdentityUser
from littleorigins.models.book import (
    BookConfiguration,
    ChildAge,
    ConceptionType,
    FamilyStructure,
)


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        identity_api_url="",
        payment_secret_key="",
        site_url="http://localhost:5173",
        book_price=29.99,
        shipping_amount=5.00,
        draft_save_retries=2,
        data_dir=tmp_path / "data",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def db(tmp_path) -> Database:
    db = Database(tmp_path / "test.db")
    db.init_schema()
    yield db
    db.close()


@pytest.fixture()
def user() -> IdentityUser:
    return IdentityUser(
        id="user_test",
        email="parent@example.com",
        first_name="Alex",
        last_name="Rivera",
        image_url="https://img.example.com/alex.png",
    )


@pytest.fixture()
def other_user() -> IdentityUser:
    return IdentityUser(id="user_other")


@pytest.fixture()
def sample_config() -> BookConfiguration:
    return BookConfiguration(
        child_name="Mia",
        child_age=ChildAge.YOUNG_CHILD,
        family_structure=FamilyStructure.TWO_MOMS,
        conception_type=ConceptionType.DONOR_EMBRYO,
        used_donor_embryo=True,
    )
