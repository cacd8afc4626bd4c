from django.urls import re_path

from modules.core.views import health_check

urlpatterns = [
    # Load balancers probe both spellings.
    re_path(r"^health/?$", health_check, name="health_check"),
]
