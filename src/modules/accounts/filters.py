import django_filters
from django.db.models import Q

from modules.accounts.models import Account


class AccountFilter(django_filters.FilterSet):
    query = django_filters.CharFilter(method="filter_query")
    role = django_filters.CharFilter(field_name="role", lookup_expr="iexact")

    class Meta:
        model = Account
        fields = ["query", "role"]

    def filter_query(self, queryset, name, value):
        return queryset.filter(Q(name__icontains=value) | Q(email__icontains=value))
