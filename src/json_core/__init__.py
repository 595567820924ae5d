"""json_core: immutable JSON trees, traversals and round-trip serializers."""

from .values import (
    JArray,
    JAssoc,
    JBool,
    JNull,
    JNumber,
    JString,
    Json,
    JsonValue,
    Null,
    narrow_double,
    narrow_long,
)
from .builders import (
    ToJson,
    arr,
    array,
    assoc,
    boolean,
    double,
    empty_array,
    empty_object,
    long,
    null,
    number,
    obj,
    string,
    to_json,
)
from .bridge import from_builtins, parse, parse_or_none, pretty_json, print_json, to_builtins
from .config import DEFAULT_CONFIG, BridgeConfig
from .errors import JsonConstructionError, JsonCoreError, ParseFailure, SerializerNotFoundError
from .navigation import concat_map_or_fail, fold_each_or_fail, navigate
from .serializer import (
    JSON_SERIALIZER,
    ConverterSerializer,
    IdentitySerializer,
    JsonSerializer,
    StructSerializer,
    reencodes_stably,
    round_trip_violations,
)
from .registry import SerializerRegistry, default_registry
from .text_codec import decode_utf8, encode_utf8

__all__ = [
    "Json",
    "JsonValue",
    "JNull",
    "JBool",
    "JNumber",
    "JString",
    "JArray",
    "JAssoc",
    "Null",
    "narrow_long",
    "narrow_double",
    "ToJson",
    "null",
    "boolean",
    "number",
    "long",
    "double",
    "string",
    "array",
    "assoc",
    "empty_object",
    "empty_array",
    "obj",
    "arr",
    "to_json",
    "parse",
    "parse_or_none",
    "print_json",
    "pretty_json",
    "to_builtins",
    "from_builtins",
    "BridgeConfig",
    "DEFAULT_CONFIG",
    "JsonCoreError",
    "JsonConstructionError",
    "SerializerNotFoundError",
    "ParseFailure",
    "navigate",
    "concat_map_or_fail",
    "fold_each_or_fail",
    "JsonSerializer",
    "IdentitySerializer",
    "StructSerializer",
    "ConverterSerializer",
    "JSON_SERIALIZER",
    "round_trip_violations",
    "reencodes_stably",
    "SerializerRegistry",
    "default_registry",
    "encode_utf8",
    "decode_utf8",
]
