from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

import pytest
from pydantic import BaseModel

from elsa_sdk.errors import SerializationError
from elsa_sdk.resources.models import (
    PagedList,
    WorkflowInstanceSummary,
    WorkflowStatus,
    WorkflowSubStatus,
)
from elsa_sdk.serialization import (
    Converter,
    ConverterKind,
    NamingPolicy,
    SerializationPolicy,
    build_serialization_policy,
)
from elsa_sdk.versioning import VersionOptions


class DefinitionReference(BaseModel):
    definition_id: str
    version_options: VersionOptions
    status: Optional[WorkflowStatus] = None


class DecimalConverter(Converter):
    def can_convert(self, target: Any) -> bool:
        return target is Decimal

    def encode(self, value: Decimal, policy: SerializationPolicy) -> str:
        return str(value)

    def decode(self, data: Any, target: Any, policy: SerializationPolicy) -> Decimal:
        return Decimal(data)


class GreedyVersionConverter(Converter):
    def can_convert(self, target: Any) -> bool:
        return target is VersionOptions

    def encode(self, value: Any, policy: SerializationPolicy) -> str:
        return "greedy"

    def decode(self, data: Any, target: Any, policy: SerializationPolicy) -> Any:
        return "greedy"


@pytest.mark.parametrize("member", list(WorkflowSubStatus))
def test_enum_round_trip(member: WorkflowSubStatus) -> None:
    policy = build_serialization_policy()
    encoded = policy.encode(member)
    assert encoded == member.name
    assert policy.decode(encoded, WorkflowSubStatus) is member


@pytest.mark.parametrize("token", ["faulted", "FAULTED", "Unknown", ""])
def test_enum_decode_is_exact_match(token: str) -> None:
    policy = build_serialization_policy()
    with pytest.raises(SerializationError):
        policy.decode(token, WorkflowSubStatus)


def test_enum_decode_rejects_numeric_values() -> None:
    policy = build_serialization_policy()
    with pytest.raises(SerializationError):
        policy.decode(5, WorkflowSubStatus)


def test_model_fields_are_camel_cased() -> None:
    policy = build_serialization_policy()
    summary = WorkflowInstanceSummary(
        id="i-1",
        definition_id="def-1",
        status=WorkflowStatus.Finished,
        sub_status=WorkflowSubStatus.Faulted,
        incident_count=2,
    )

    encoded = policy.encode(summary)

    assert encoded["definitionId"] == "def-1"
    assert encoded["subStatus"] == "Faulted"
    assert encoded["status"] == "Finished"
    assert encoded["incidentCount"] == 2
    assert "sub_status" not in encoded


def test_model_decodes_from_camel_case_payload() -> None:
    policy = build_serialization_policy()
    payload = {
        "id": "i-1",
        "definitionId": "def-1",
        "status": "Running",
        "subStatus": "Suspended",
        "createdAt": "2024-05-01T10:00:00+00:00",
        "unknownField": True,
    }

    instance = policy.decode(payload, WorkflowInstanceSummary)

    assert instance.definition_id == "def-1"
    assert instance.sub_status is WorkflowSubStatus.Suspended
    assert instance.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert instance.finished_at is None


def test_nested_version_options_use_token_converter() -> None:
    policy = build_serialization_policy()
    reference = DefinitionReference(definition_id="def-1", version_options=VersionOptions.published())

    body = policy.dumps(reference)

    assert body == b'{"definitionId":"def-1","versionOptions":"Published","status":null}'
    assert policy.loads(body, DefinitionReference) == reference


def test_model_decode_surfaces_bad_enum_token() -> None:
    policy = build_serialization_policy()
    with pytest.raises(SerializationError):
        policy.decode({"definitionId": "d", "versionOptions": "Latest", "status": "running"}, DefinitionReference)


def test_generic_paged_list_decodes_items() -> None:
    policy = build_serialization_policy()
    payload = {
        "items": [{"id": "i-1", "definitionId": "d", "status": "Running", "subStatus": "Executing"}],
        "totalCount": 1,
    }

    page = policy.decode(payload, PagedList[WorkflowInstanceSummary])

    assert page.total_count == 1
    assert page.items[0].sub_status is WorkflowSubStatus.Executing


def test_builtin_converters_take_precedence_over_application_converters() -> None:
    policy = build_serialization_policy([GreedyVersionConverter(), DecimalConverter()])

    assert [converter.kind for converter in policy.converters] == [
        ConverterKind.ENUM,
        ConverterKind.VERSION_OPTIONS,
        ConverterKind.CUSTOM,
        ConverterKind.CUSTOM,
        ConverterKind.FALLBACK,
    ]
    assert policy.encode(VersionOptions.latest()) == "Latest"
    assert policy.decode("Latest", VersionOptions) == VersionOptions.latest()
    assert policy.encode(Decimal("1.50")) == "1.50"
    assert policy.decode("2.25", Decimal) == Decimal("2.25")


def test_encode_query_names_and_values() -> None:
    policy = build_serialization_policy()

    query = policy.encode_query(
        {
            "version_options": VersionOptions.specific(3),
            "page_size": 10,
            "is_system": False,
            "search_term": None,
            "order_direction": WorkflowStatus.Running,
        }
    )

    assert query == {"versionOptions": "3", "pageSize": "10", "isSystem": "false", "orderDirection": "Running"}


def test_as_is_naming_keeps_field_names() -> None:
    policy = SerializationPolicy(converters=build_serialization_policy().converters, naming=NamingPolicy.AS_IS)
    encoded = policy.encode(DefinitionReference(definition_id="d", version_options=VersionOptions.all()))
    assert encoded == {"definition_id": "d", "version_options": "All", "status": None}


def test_invalid_json_raises_serialization_error() -> None:
    policy = build_serialization_policy()
    with pytest.raises(SerializationError):
        policy.loads(b"{not json", WorkflowInstanceSummary)


def test_empty_body_without_target_is_none() -> None:
    policy = build_serialization_policy()
    assert policy.loads(b"", None) is None


def test_mapping_keys_use_converters() -> None:
    policy = build_serialization_policy()

    encoded = policy.encode({WorkflowStatus.Running: 2, WorkflowStatus.Finished: 5})
    assert encoded == {"Running": 2, "Finished": 5}
    assert policy.encode({VersionOptions.latest(): "x", 3: "y"}) == {"Latest": "x", "3": "y"}

    decoded = policy.loads(policy.dumps({WorkflowStatus.Running: 2}), Dict[WorkflowStatus, int])
    assert decoded == {WorkflowStatus.Running: 2}


def test_mapping_key_decode_rejects_unknown_member() -> None:
    policy = build_serialization_policy()
    with pytest.raises(SerializationError):
        policy.decode({"Sleeping": 1}, Dict[WorkflowStatus, int])
