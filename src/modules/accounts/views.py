"""Account API views.

Exposes ``AccountService`` over HTTP.  Domain exceptions propagate to
``modules.core.exception_handler``, which renders them as JSON errors.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.mixins import ListModelMixin
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.constants import Role
from modules.accounts.dtos import (
    AssignRoleDTO,
    LoginDTO,
    RegisterAccountDTO,
    ResetPasswordDTO,
)
from modules.accounts.exceptions import InvalidRole
from modules.accounts.filters import AccountFilter
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.serializers import (
    AccountProfileSerializer,
    AccountSearchSerializer,
    AssignRoleSerializer,
    LoginSerializer,
    RegisterAccountSerializer,
    ResetPasswordSerializer,
)
from modules.accounts.services import AccountService
from modules.core.validation import build_dto, require_valid


def _account_service() -> AccountService:
    return AccountService(repository=AccountDjangoRepository())


class RegisterAccountView(APIView):
    """POST /api/users/: public sign-up."""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = require_valid(RegisterAccountSerializer(data=request.data))
        dto = build_dto(RegisterAccountDTO, **data)
        account = _account_service().register(dto)
        return Response(
            {"message": "User registered successfully", "userId": account.id},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """POST /api/users/login/ {email, password}

    Checks the credentials of a brokerage account.  API access itself is
    granted by the JWT endpoints.
    """

    permission_classes = [AllowAny]
    throttle_scope = "login"

    def post(self, request: Request) -> Response:
        data = require_valid(LoginSerializer(data=request.data))
        dto = build_dto(LoginDTO, email=data["email"], password=data["password"])
        account = _account_service().authenticate(dto)
        return Response(
            {"message": "Login successful", "user": AccountProfileSerializer(account).data}
        )


class ResetPasswordView(APIView):
    """POST /api/users/reset-password/ {email, newPassword}"""

    def post(self, request: Request) -> Response:
        data = require_valid(ResetPasswordSerializer(data=request.data))
        dto = build_dto(
            ResetPasswordDTO, email=data["email"], new_password=data["newPassword"]
        )
        _account_service().reset_password(dto)
        return Response({"message": "Password reset successful"})


class AccountSearchView(ListModelMixin, GenericAPIView):
    """GET /api/users/search/?query=

    Matches ``query`` against name and email (case-insensitive).
    """

    serializer_class = AccountSearchSerializer
    filterset_class = AccountFilter
    filter_backends = [DjangoFilterBackend]

    def get_queryset(self):
        return _account_service().search_queryset()

    def get(self, request: Request) -> Response:
        return self.list(request)


class AssignRoleView(APIView):
    """POST /api/users/assign-role/ {userId, role}"""

    def post(self, request: Request) -> Response:
        data = require_valid(AssignRoleSerializer(data=request.data))
        if data["role"] not in {role.value for role in Role}:
            raise InvalidRole("Invalid role")
        dto = build_dto(AssignRoleDTO, user_id=data["userId"], role=data["role"])
        _account_service().assign_role(dto)
        return Response({"success": True})


class AccountDetailView(APIView):
    """DELETE /api/users/{user_id}/"""

    def delete(self, request: Request, user_id: int) -> Response:
        _account_service().delete_account(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
