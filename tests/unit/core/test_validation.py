"""Unit tests for request validation helpers.

Covers:
- Missing fields reported together by request name
- Other serializer errors reported as "Invalid request"
- Pydantic errors from our validators keep their message verbatim
"""

import pytest
from rest_framework import serializers

from modules.core.exceptions import InvalidArgument
from modules.core.validation import build_dto, require_valid
from modules.deliveries.dtos import CancelOrderDTO
from modules.drivers.dtos import NearestDriversQuery

pytestmark = pytest.mark.unit


class _ExampleSerializer(serializers.Serializer):
    customerId = serializers.IntegerField()
    source = serializers.CharField()
    note = serializers.CharField(required=False)


class TestRequireValid:
    def test_returns_validated_data(self):
        data = require_valid(_ExampleSerializer(data={"customerId": "7", "source": "Tunis"}))
        assert data == {"customerId": 7, "source": "Tunis"}

    def test_missing_fields_listed_in_declaration_order(self):
        with pytest.raises(InvalidArgument) as exc_info:
            require_valid(_ExampleSerializer(data={}))
        assert str(exc_info.value) == "Missing required fields: customerId, source"

    def test_blank_counts_as_missing(self):
        with pytest.raises(InvalidArgument) as exc_info:
            require_valid(_ExampleSerializer(data={"customerId": 7, "source": ""}))
        assert str(exc_info.value) == "Missing required fields: source"

    def test_type_errors_are_invalid_request(self):
        with pytest.raises(InvalidArgument) as exc_info:
            require_valid(_ExampleSerializer(data={"customerId": "abc", "source": "x"}))
        assert str(exc_info.value).startswith("Invalid request: customerId")


class TestBuildDto:
    def test_own_validator_message_is_kept(self):
        with pytest.raises(InvalidArgument) as exc_info:
            build_dto(CancelOrderDTO, order_id="abc")
        assert str(exc_info.value) == "Invalid delivery ID"

    def test_constraint_errors_name_the_field(self):
        with pytest.raises(InvalidArgument) as exc_info:
            build_dto(NearestDriversQuery, latitude=91, longitude=10)
        assert str(exc_info.value).startswith("latitude:")

    def test_returns_dto(self):
        dto = build_dto(CancelOrderDTO, order_id=" 12 ")
        assert dto.order_id == 12
