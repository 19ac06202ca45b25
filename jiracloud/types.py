#!/usr/bin/env python3
"""
Jira Types - JSON (de)serialization for Jira payloads

Provides:
- Time / Date wrappers that understand the timestamp formats Jira emits
- JiraModel, a dataclass base that maps camelCase JSON keys to attributes
- decode(), turning decoded JSON into a target type (models, lists, dicts)
- JiraJSONEncoder, used for every request body
"""

import dataclasses
import json
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Tuple, Union, get_args, get_origin, get_type_hints

# Tried in order when decoding; the first one that parses wins
TIME_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%d",
]

DATE_FORMAT = "%Y-%m-%d"


def format_time(value: datetime) -> str:
    """Format a datetime the way Jira expects it, e.g. 2024-01-15T10:30:45.123+0000"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    millis = value.microsecond // 1000
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}{value.strftime('%z')}"


class Time(datetime):
    """A timestamp as found in Jira payloads (created, updated, started, ...)"""

    @classmethod
    def parse(cls, value: str) -> "Time":
        """
        Parse a Jira timestamp

        Args:
            value: String in one of TIME_FORMATS; an empty string gives None

        Returns:
            Time in the parsed offset (UTC when the format carries none)
        """
        if not isinstance(value, str):
            raise TypeError(f"expected a time string, got {type(value).__name__}")
        if value == "":
            return None

        for fmt in TIME_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
            except ValueError:
                continue
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return cls(
                parsed.year,
                parsed.month,
                parsed.day,
                parsed.hour,
                parsed.minute,
                parsed.second,
                parsed.microsecond,
                tzinfo=parsed.tzinfo,
            )

        raise ValueError(f"unrecognised Jira time: {value!r}")

    def to_json(self) -> str:
        return format_time(self)


class Date(date):
    """A date-only value (due dates, release dates)"""

    @classmethod
    def parse(cls, value: str) -> "Date":
        if not isinstance(value, str):
            raise TypeError(f"expected a date string, got {type(value).__name__}")
        if value == "":
            return None
        parsed = datetime.strptime(value, DATE_FORMAT)
        return cls(parsed.year, parsed.month, parsed.day)

    def to_json(self) -> str:
        return self.strftime(DATE_FORMAT)


def json_field(key: str, default: Any = None) -> Any:
    """Dataclass field whose JSON key is not the camelCase of the attribute name"""
    return dataclasses.field(default=default, metadata={"json": key})


def catch_all() -> Any:
    """Dataclass field collecting every JSON key the model does not declare"""
    return dataclasses.field(default_factory=dict, metadata={"unknowns": True})


def _camel(name: str) -> str:
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


# model class -> [(attribute, json key, type, is catch-all)]
_FIELD_CACHE: Dict[type, List[Tuple[str, str, Any, bool]]] = {}


def _model_fields(cls: type) -> List[Tuple[str, str, Any, bool]]:
    cached = _FIELD_CACHE.get(cls)
    if cached is None:
        hints = get_type_hints(cls)
        cached = []
        for f in dataclasses.fields(cls):
            key = f.metadata.get("json") or _camel(f.name)
            cached.append((f.name, key, hints.get(f.name, Any), bool(f.metadata.get("unknowns"))))
        _FIELD_CACHE[cls] = cached
    return cached


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict, tuple)) and len(value) == 0:
        return True
    return False


def encode_value(value: Any) -> Any:
    """Turn models, times and dates into JSON-ready values, recursively"""
    if isinstance(value, JiraModel):
        return value.to_dict()
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items()}
    return value


class JiraModel:
    """
    Base class for the dataclasses describing Jira resources.

    Attributes map to the camelCase of their name unless declared with
    json_field(). On encode, None, empty strings and empty collections are
    left out so that request bodies only carry what the caller set.
    """

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object for {cls.__name__}, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        known = set()
        unknowns_attr = None

        for attr, key, tp, is_catch_all in _model_fields(cls):
            if is_catch_all:
                unknowns_attr = attr
                continue
            known.add(key)
            if key in data:
                kwargs[attr] = decode(tp, data[key])

        if unknowns_attr:
            kwargs[unknowns_attr] = {k: v for k, v in data.items() if k not in known}

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key, _, is_catch_all in _model_fields(type(self)):
            value = getattr(self, attr)
            if is_catch_all:
                for extra_key, extra_value in (value or {}).items():
                    out.setdefault(extra_key, encode_value(extra_value))
                continue
            if _is_empty(value):
                continue
            out[key] = encode_value(value)
        return out


def decode(target: Any, value: Any) -> Any:
    """
    Convert decoded JSON into the target type

    Args:
        target: A JiraModel subclass, Time, Date, List[...], Dict[str, ...],
            Optional[...], a primitive type or Any
        value: Output of json.loads

    Raises:
        TypeError/ValueError when the value does not fit the target's shape
    """
    if value is None or target is Any or target is object or target is None:
        return value

    origin = get_origin(target)

    if origin is Union:
        args = [a for a in get_args(target) if a is not type(None)]
        if len(args) == 1:
            return decode(args[0], value)
        return value

    if origin is list:
        args = get_args(target)
        if not isinstance(value, list):
            raise TypeError(f"expected a JSON array, got {type(value).__name__}")
        item_type = args[0] if args else Any
        return [decode(item_type, v) for v in value]

    if origin is dict:
        args = get_args(target)
        if not isinstance(value, dict):
            raise TypeError(f"expected a JSON object, got {type(value).__name__}")
        value_type = args[1] if len(args) == 2 else Any
        return {k: decode(value_type, v) for k, v in value.items()}

    if not isinstance(target, type):
        return value

    if issubclass(target, JiraModel):
        return target.from_dict(value)
    if issubclass(target, Time):
        return Time.parse(value)
    if issubclass(target, Date):
        return Date.parse(value)
    if target is bool:
        if not isinstance(value, bool):
            raise TypeError(f"expected a JSON boolean, got {type(value).__name__}")
        return value
    if target is int:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.lstrip("-").isdigit():
            return int(value)
        return value
    if target is float:
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value
    if target is str:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
    if target in (list, dict) and not isinstance(value, target):
        raise TypeError(f"expected {target.__name__}, got {type(value).__name__}")

    return value


def empty_value(target: Any) -> Any:
    """The value a call yields when Jira sent a 2xx without a body"""
    if isinstance(target, type) and issubclass(target, JiraModel):
        return target()
    origin = get_origin(target)
    if origin is list or target is list:
        return []
    if origin is dict or target is dict:
        return {}
    return None


class JiraJSONEncoder(json.JSONEncoder):
    """JSON encoder for request bodies; knows about models, Time and Date"""

    def default(self, o):
        if isinstance(o, (JiraModel, datetime, date)):
            return encode_value(o)
        if isinstance(o, (set, frozenset)):
            return list(o)
        return super().default(o)


def to_json(body: Any) -> bytes:
    """Encode a request body. HTML characters are left as they are."""
    return json.dumps(body, cls=JiraJSONEncoder, ensure_ascii=False, allow_nan=False).encode("utf-8")
