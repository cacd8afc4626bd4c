"""Account URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.accounts.views import (
    AccountDetailView,
    AccountSearchView,
    AssignRoleView,
    LoginView,
    RegisterAccountView,
    ResetPasswordView,
)

urlpatterns = [
    path("", RegisterAccountView.as_view(), name="account-register"),
    path("login/", LoginView.as_view(), name="account-login"),
    path("reset-password/", ResetPasswordView.as_view(), name="account-reset-password"),
    path("search/", AccountSearchView.as_view(), name="account-search"),
    path("assign-role/", AssignRoleView.as_view(), name="account-assign-role"),
    path("<int:user_id>/", AccountDetailView.as_view(), name="account-detail"),
]
