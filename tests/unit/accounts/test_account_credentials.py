"""Unit tests for AccountService credential operations.

Covers:
- authenticate: matching password, wrong password, unknown and deleted accounts
- reset_password: new hash replaces the old one, unknown and deleted accounts
"""

import pytest

from modules.accounts.dtos import LoginDTO, ResetPasswordDTO
from modules.accounts.exceptions import AccountNotFound, InvalidCredentials
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return AccountService(repository=AccountDjangoRepository())


class TestAuthenticate:
    def test_matching_password(self, service, customer):
        account = service.authenticate(
            LoginDTO(email="AMIRA@example.com", password="password123")
        )

        assert account.id == customer.id

    def test_wrong_password(self, service, customer):
        with pytest.raises(InvalidCredentials) as exc_info:
            service.authenticate(LoginDTO(email=customer.email, password="nope"))
        assert str(exc_info.value) == "Invalid credentials"

    def test_unknown_email(self, service):
        with pytest.raises(InvalidCredentials):
            service.authenticate(
                LoginDTO(email="ghost@example.com", password="password123")
            )

    def test_deleted_account(self, service, customer):
        customer.delete()

        with pytest.raises(InvalidCredentials):
            service.authenticate(
                LoginDTO(email=customer.email, password="password123")
            )


class TestResetPassword:
    def test_replaces_password(self, service, customer):
        service.reset_password(
            ResetPasswordDTO(email=customer.email, new_password="brand-new-pass")
        )

        customer.refresh_from_db()
        assert customer.check_password("brand-new-pass")
        assert not customer.check_password("password123")

    def test_unknown_email(self, service):
        with pytest.raises(AccountNotFound) as exc_info:
            service.reset_password(
                ResetPasswordDTO(email="ghost@example.com", new_password="brand-new-pass")
            )
        assert str(exc_info.value) == "User not found"

    def test_deleted_account(self, service, customer):
        customer.delete()

        with pytest.raises(AccountNotFound):
            service.reset_password(
                ResetPasswordDTO(email=customer.email, new_password="brand-new-pass")
            )

    def test_short_password_rejected(self):
        with pytest.raises(ValueError):
            ResetPasswordDTO(email="amira@example.com", new_password="short")
