"""Unit tests for AccountService.

Covers:
- Registration (password hashing, duplicate email, driver profile for delivery men)
- Role assignment (side tables, duplicate role)
- Soft delete and identity look-up
"""

import pytest

from modules.accounts.constants import Role
from modules.accounts.dtos import AssignRoleDTO, RegisterAccountDTO
from modules.accounts.exceptions import (
    AccountAlreadyExists,
    AccountNotFound,
    RoleAlreadyAssigned,
)
from modules.accounts.models import Account, Administrator
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService
from modules.drivers.models import Driver

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return AccountService(repository=AccountDjangoRepository())


def _register_dto(**overrides):
    data = {
        "name": "Youssef Trabelsi",
        "email": "Youssef@Example.com",
        "password": "s3cure-pass",
        "phone": "+216 22111222",
        "location": "Sfax",
        "role": "Client",
    }
    data.update(overrides)
    return RegisterAccountDTO(**data)


class TestRegister:
    def test_creates_account_with_hashed_password(self, service):
        account = service.register(_register_dto())

        stored = Account.objects.get(id=account.id)
        assert stored.email == "youssef@example.com"
        assert stored.password_hash != "s3cure-pass"
        assert stored.check_password("s3cure-pass")

    def test_duplicate_email_is_case_insensitive(self, service):
        service.register(_register_dto())

        with pytest.raises(AccountAlreadyExists):
            service.register(_register_dto(email="YOUSSEF@example.com"))

    def test_delivery_man_gets_driver_profile(self, service):
        account = service.register(_register_dto(role="Delivery Man"))

        assert Driver.objects.filter(user=account).exists()

    def test_client_has_no_driver_profile(self, service):
        account = service.register(_register_dto())

        assert not Driver.objects.filter(user=account).exists()


class TestAssignRole:
    def test_grants_admin(self, service, customer):
        service.assign_role(AssignRoleDTO(user_id=customer.id, role=Role.ADMIN))

        assert Administrator.objects.filter(user=customer).exists()

    def test_grants_driver(self, service, customer):
        service.assign_role(AssignRoleDTO(user_id=customer.id, role="driver"))

        assert Driver.objects.filter(user=customer).exists()

    def test_twice_is_a_conflict(self, service, customer):
        service.assign_role(AssignRoleDTO(user_id=customer.id, role=Role.ADMIN))

        with pytest.raises(RoleAlreadyAssigned):
            service.assign_role(AssignRoleDTO(user_id=customer.id, role=Role.ADMIN))

    def test_unknown_user(self, service):
        with pytest.raises(AccountNotFound):
            service.assign_role(AssignRoleDTO(user_id=999, role=Role.ADMIN))


class TestDeleteAccount:
    def test_soft_deletes(self, service, customer):
        service.delete_account(customer.id)

        customer.refresh_from_db()
        assert customer.is_deleted
        with pytest.raises(AccountNotFound):
            service.get_account(customer.id)

    def test_unknown_user(self, service):
        with pytest.raises(AccountNotFound):
            service.delete_account(999)
