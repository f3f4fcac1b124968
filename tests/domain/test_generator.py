"""Tests for UserDataGenerator — every output must pass validation."""

import random

import pytest

from userctl.domain.generator import (
    FIRST_NAMES,
    SYMBOLS,
    UserDataGenerator,
)
from userctl.domain.user import User
from userctl.domain.validators import is_valid_email, is_valid_name, is_valid_password

ITERATIONS = 200


def _has_upper(s: str) -> bool:
    return any(c.isupper() for c in s)


def _has_digit(s: str) -> bool:
    return any(c.isdigit() for c in s)


def _assert_valid(user: User) -> None:
    assert is_valid_name(user.name)
    assert is_valid_password(user.password)
    assert is_valid_email(user.email)


@pytest.fixture
def gen() -> UserDataGenerator:
    return UserDataGenerator(seed=1234)


class TestFields:
    def test_generate_name(self, gen: UserDataGenerator) -> None:
        for _ in range(ITERATIONS):
            name = gen.generate_name()
            assert is_valid_name(name)
            assert name.split(" ")[0] in FIRST_NAMES

    def test_generate_email(self, gen: UserDataGenerator) -> None:
        for _ in range(ITERATIONS):
            email = gen.generate_email()
            assert is_valid_email(email)
            local, domain = email.split("@")
            assert local
            assert "." in domain

    def test_generate_password(self, gen: UserDataGenerator) -> None:
        for _ in range(ITERATIONS):
            pw = gen.generate_password()
            assert 6 <= len(pw) <= 12
            assert _has_upper(pw)
            assert _has_digit(pw)
            assert is_valid_password(pw)

    def test_generate_strong_password(self, gen: UserDataGenerator) -> None:
        for _ in range(ITERATIONS):
            pw = gen.generate_strong_password()
            assert len(pw) >= 8
            assert _has_upper(pw)
            assert _has_digit(pw)
            assert any(c in SYMBOLS for c in pw)

    def test_passwords_never_contain_delimiter_or_space(self, gen: UserDataGenerator) -> None:
        for _ in range(ITERATIONS):
            pw = gen.generate_strong_password()
            assert ";" not in pw
            assert not any(c.isspace() for c in pw)


class TestGenerateUser:
    def test_prefix_and_domain(self, gen: UserDataGenerator) -> None:
        user = gen.generate_user("testuser", "example.com")
        assert user.name.startswith("testuser_")
        assert user.email.split("@")[1] == "example.com"
        _assert_valid(user)

    def test_prefix_with_unsafe_characters(self, gen: UserDataGenerator) -> None:
        user = gen.generate_user("Ann Lee!", "corp.io")
        assert user.name.startswith("Ann Lee!_")
        assert is_valid_email(user.email)

    def test_empty_prefix_still_valid(self, gen: UserDataGenerator) -> None:
        user = gen.generate_user("", "corp.io")
        _assert_valid(user)

    @pytest.mark.parametrize("domain", ["localhost", "", "bad domain.com", ".com"])
    def test_invalid_domain_raises(self, gen: UserDataGenerator, domain: str) -> None:
        with pytest.raises(ValueError, match="Invalid email domain"):
            gen.generate_user("user", domain)


class TestGenerateUsers:
    @pytest.mark.parametrize("count", [0, 1, 5, 50])
    def test_exact_count_and_valid(self, gen: UserDataGenerator, count: int) -> None:
        users = gen.generate_users(count)
        assert len(users) == count
        for user in users:
            _assert_valid(user)

    def test_zero_is_empty(self, gen: UserDataGenerator) -> None:
        assert gen.generate_users(0) == []

    def test_negative_is_empty(self, gen: UserDataGenerator) -> None:
        assert gen.generate_users(-3) == []


class TestGenerateUsersWithVariety:
    @pytest.mark.parametrize("count", [0, 1, 2, 10])
    def test_exact_count_and_valid(self, gen: UserDataGenerator, count: int) -> None:
        users = gen.generate_users_with_variety(count)
        assert len(users) == count
        for user in users:
            _assert_valid(user)

    def test_two_records_differ_in_shape(self, gen: UserDataGenerator) -> None:
        first, second = gen.generate_users_with_variety(2)
        # standard passwords cap at 12 chars without symbols; strong ones carry a symbol
        assert not any(c in SYMBOLS for c in first.password)
        assert any(c in SYMBOLS for c in second.password)

    def test_batch_includes_prefixed_and_full_name(self, gen: UserDataGenerator) -> None:
        users = gen.generate_users_with_variety(4)
        assert "_" in users[2].name
        assert " " in users[3].name


class TestSeeding:
    def test_same_seed_same_output(self) -> None:
        a = UserDataGenerator(seed=7).generate_users_with_variety(8)
        b = UserDataGenerator(seed=7).generate_users_with_variety(8)
        assert a == b

    def test_explicit_rng(self) -> None:
        a = UserDataGenerator(rng=random.Random(99)).generate_users(3)
        b = UserDataGenerator(rng=random.Random(99)).generate_users(3)
        assert a == b
