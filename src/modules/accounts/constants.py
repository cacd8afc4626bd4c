"""Account domain constants.

``AccountRole`` is the role chosen at registration.  ``Role`` is the
closed set of side-table roles an administrator can grant; each value maps
to one fixed model (see ``AccountDjangoRepository.ROLE_MODELS``).
"""

from enum import StrEnum

from django.db import models


class AccountRole(models.TextChoices):
    CLIENT = "Client", "Client"
    DELIVERY_MAN = "Delivery Man", "Delivery Man"


class Role(StrEnum):
    DRIVER = "driver"
    ADMIN = "admin"
