"""JSON serialization policy shared by every API surface client.

Wire conventions: camelCase field names, enums as member names, and
``VersionOptions`` as compact tokens. Converters are held in an ordered tuple
and the first one that accepts a type handles it.
"""

from __future__ import annotations

import json
import types
from collections import abc
from dataclasses import dataclass
from enum import Enum
from inspect import isclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticSerializationError

from .errors import SerializationError
from .versioning import VersionOptions


class NamingPolicy(Enum):
    CAMEL_CASE = "camelCase"
    AS_IS = "asIs"

    def apply(self, name: str) -> str:
        if self is NamingPolicy.CAMEL_CASE:
            return to_camel(name)
        return name


class ConverterKind(Enum):
    ENUM = "enum"
    VERSION_OPTIONS = "version_options"
    CUSTOM = "custom"
    FALLBACK = "fallback"


class Converter:
    kind: ConverterKind = ConverterKind.CUSTOM

    def can_convert(self, target: Any) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    def encode(self, value: Any, policy: "SerializationPolicy") -> Any:  # pragma: no cover - interface
        raise NotImplementedError

    def decode(self, data: Any, target: Any, policy: "SerializationPolicy") -> Any:  # pragma: no cover - interface
        raise NotImplementedError


class StringEnumConverter(Converter):
    kind = ConverterKind.ENUM

    def can_convert(self, target: Any) -> bool:
        return isclass(target) and issubclass(target, Enum)

    def encode(self, value: Enum, policy: "SerializationPolicy") -> str:
        return value.name

    def decode(self, data: Any, target: Any, policy: "SerializationPolicy") -> Enum:
        if not isinstance(data, str):
            raise SerializationError(f"expected a string for {target.__name__}, got {type(data).__name__}")
        member = target.__members__.get(data)
        if member is None:
            raise SerializationError(f"{data!r} is not a member of {target.__name__}")
        return member


class VersionOptionsConverter(Converter):
    kind = ConverterKind.VERSION_OPTIONS

    def can_convert(self, target: Any) -> bool:
        return target is VersionOptions

    def encode(self, value: VersionOptions, policy: "SerializationPolicy") -> str:
        return value.to_token()

    def decode(self, data: Any, target: Any, policy: "SerializationPolicy") -> VersionOptions:
        if not isinstance(data, str):
            raise SerializationError(f"expected a version options token, got {type(data).__name__}")
        return VersionOptions.from_token(data)


class FallbackConverter(Converter):
    """Handles primitives, containers and pydantic models."""

    kind = ConverterKind.FALLBACK

    def can_convert(self, target: Any) -> bool:
        return True

    def encode(self, value: Any, policy: "SerializationPolicy") -> Any:
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, BaseModel):
            return {
                policy.naming.apply(name): policy.encode(getattr(value, name))
                for name in type(value).model_fields
            }
        if isinstance(value, Mapping):
            return {_encode_key(key, policy): policy.encode(item) for key, item in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [policy.encode(item) for item in value]
        try:
            return TypeAdapter(type(value)).dump_python(value, mode="json")
        except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
            raise SerializationError(f"cannot encode value of type {type(value).__name__}") from exc

    def decode(self, data: Any, target: Any, policy: "SerializationPolicy") -> Any:
        if target is Any or target is object:
            return data

        origin = get_origin(target)
        if origin is Union or origin is types.UnionType:
            return self._decode_union(data, get_args(target), policy)
        if origin in (list, tuple, set, frozenset) or target in (list, tuple):
            if not isinstance(data, list):
                raise SerializationError(f"expected a JSON array, got {type(data).__name__}")
            args = get_args(target)
            item_type = args[0] if args else Any
            items = [policy.decode(item, item_type) for item in data]
            container = origin or target
            return items if container is list else container(items)
        if origin in (dict, abc.Mapping) or target is dict:
            if not isinstance(data, dict):
                raise SerializationError(f"expected a JSON object, got {type(data).__name__}")
            args = get_args(target)
            key_type, value_type = args if len(args) == 2 else (str, Any)
            return {
                key if key_type in (str, Any) else policy.decode(key, key_type): policy.decode(item, value_type)
                for key, item in data.items()
            }
        if isclass(target) and issubclass(target, BaseModel):
            return self._decode_model(data, target, policy)

        try:
            return TypeAdapter(target).validate_python(data)
        except ValidationError as exc:
            raise SerializationError(f"cannot decode {data!r} as {target!r}") from exc

    def _decode_union(self, data: Any, args: Tuple[Any, ...], policy: "SerializationPolicy") -> Any:
        if data is None and type(None) in args:
            return None
        candidates = [arg for arg in args if arg is not type(None)]
        last_error: Optional[SerializationError] = None
        for candidate in candidates:
            try:
                return policy.decode(data, candidate)
            except SerializationError as exc:
                last_error = exc
        raise SerializationError(f"{data!r} matches none of {candidates!r}") from last_error

    def _decode_model(self, data: Any, target: type, policy: "SerializationPolicy") -> BaseModel:
        if not isinstance(data, dict):
            raise SerializationError(f"expected a JSON object for {target.__name__}, got {type(data).__name__}")
        values: Dict[str, Any] = {}
        for name, info in target.model_fields.items():
            key = policy.naming.apply(name)
            if key in data:
                values[name] = policy.decode(data[key], info.annotation)
        try:
            return target.model_validate(values)
        except ValidationError as exc:
            raise SerializationError(f"invalid {target.__name__} payload: {exc}") from exc


def _encode_key(key: Any, policy: "SerializationPolicy") -> str:
    encoded = policy.encode(key)
    return encoded if isinstance(encoded, str) else json.dumps(encoded)


@dataclass(frozen=True)
class SerializationPolicy:
    converters: Tuple[Converter, ...]
    naming: NamingPolicy = NamingPolicy.CAMEL_CASE

    def converter_for(self, target: Any) -> Converter:
        for converter in self.converters:
            if converter.can_convert(target):
                return converter
        raise SerializationError(f"no converter registered for {target!r}")

    def encode(self, value: Any) -> Any:
        return self.converter_for(type(value)).encode(value, self)

    def decode(self, data: Any, target: Any) -> Any:
        return self.converter_for(target).decode(data, target, self)

    def dumps(self, value: Any) -> bytes:
        return json.dumps(self.encode(value), separators=(",", ":")).encode("utf-8")

    def loads(self, content: bytes, target: Any) -> Any:
        if target is None:
            return None
        try:
            data = json.loads(content) if content else None
        except json.JSONDecodeError as exc:
            raise SerializationError(f"response body is not valid JSON: {exc}") from exc
        return self.decode(data, target)

    def encode_query(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        for name, value in params.items():
            if value is None:
                continue
            encoded = self.encode(value)
            if isinstance(encoded, bool):
                encoded = "true" if encoded else "false"
            elif isinstance(encoded, list):
                encoded = [str(item) for item in encoded]
            else:
                encoded = str(encoded)
            query[self.naming.apply(name)] = encoded
        return query


def build_serialization_policy(extra_converters: Iterable[Converter] = ()) -> SerializationPolicy:
    """Build the shared policy.

    Built-in converters are evaluated before ``extra_converters`` so reserved
    version tokens and enum names are never claimed by application code.
    """
    converters = (
        StringEnumConverter(),
        VersionOptionsConverter(),
        *extra_converters,
        FallbackConverter(),
    )
    return SerializationPolicy(converters=converters)


__all__ = [
    "Converter",
    "ConverterKind",
    "FallbackConverter",
    "NamingPolicy",
    "SerializationPolicy",
    "StringEnumConverter",
    "VersionOptionsConverter",
    "build_serialization_policy",
]
