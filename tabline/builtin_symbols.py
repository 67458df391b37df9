# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A default catalog of PHP built-in symbols.

A shell embedding Tabline normally feeds its catalog from PHP reflection; this
seed lets the engine and CLI work stand-alone. Entries are declared in the same
shape as the `classes` / `functions` / `constants` sections of a config file.
"""
from __future__ import annotations

from typing import Any

from tabline.catalog import ClassDescriptor, FunctionDescriptor, SymbolTable

BUILTIN_CLASSES: list[dict[str, Any]] = [
    {"name": "stdClass"},
    {"name": "Traversable", "interface": True},
    {"name": "Countable", "interface": True, "methods": ["count"]},
    {"name": "JsonSerializable", "interface": True, "methods": ["jsonSerialize"]},
    {
        "name": "Exception",
        "methods": [
            {"name": "__construct", "parameters": [
                {"name": "message", "default": ""},
                {"name": "code", "default": 0},
                {"name": "previous", "default": None},
            ]},
            "getMessage", "getCode", "getPrevious", "getFile", "getLine",
            "getTrace", "getTraceAsString", "__toString",
        ],
        "properties": [
            {"name": "message", "visibility": "protected"},
            {"name": "code", "visibility": "protected"},
            {"name": "file", "visibility": "protected"},
            {"name": "line", "visibility": "protected"},
        ],
    },
    {"name": "RuntimeException", "parent": "Exception"},
    {"name": "InvalidArgumentException", "parent": "Exception"},
    {"name": "DateTimeInterface", "interface": True, "constants": {
        "ATOM": "Y-m-d\\TH:i:sP",
        "ISO8601": "Y-m-d\\TH:i:sO",
        "RFC2822": "D, d M Y H:i:s O",
        "RSS": "D, d M Y H:i:s O",
    }},
    {
        "name": "DateTime",
        "parent": "DateTimeInterface",
        "methods": [
            {"name": "__construct", "parameters": [
                {"name": "datetime", "default": "now"},
                {"name": "timezone", "default": None},
            ]},
            {"name": "createFromFormat", "static": True,
             "parameters": ["format", "datetime", {"name": "timezone", "default": None}]},
            {"name": "getLastErrors", "static": True},
            "format", "modify", "getTimestamp", "setTimestamp", "getTimezone",
            "setTimezone", "add", "sub", "diff",
            {"name": "setTime", "parameters": [
                "hour", "minute", {"name": "second", "default": 0},
                {"name": "microsecond", "default": 0},
            ]},
        ],
    },
    {
        "name": "DateTimeImmutable",
        "parent": "DateTimeInterface",
        "methods": [
            {"name": "createFromMutable", "static": True, "parameters": ["object"]},
            {"name": "createFromFormat", "static": True,
             "parameters": ["format", "datetime", {"name": "timezone", "default": None}]},
            "format", "modify", "getTimestamp", "setTimestamp", "add", "sub",
        ],
    },
    {
        "name": "DateTimeZone",
        "constants": {"UTC": 1024, "EUROPE": 128, "AMERICA": 2, "ALL": 2047},
        "methods": [
            {"name": "listIdentifiers", "static": True, "parameters": [
                {"name": "timezoneGroup", "default": 2047},
                {"name": "countryCode", "default": None},
            ]},
            "getName", "getOffset", "getLocation",
        ],
    },
    {"name": "DateInterval", "properties": ["y", "m", "d", "h", "i", "s", "f", "invert", "days"]},
    {
        "name": "ArrayObject",
        "constants": {"STD_PROP_LIST": 1, "ARRAY_AS_PROPS": 2},
        "methods": [
            {"name": "__construct", "parameters": [
                {"name": "array", "default": []},
                {"name": "flags", "default": 0},
                {"name": "iteratorClass", "default": "ArrayIterator"},
            ]},
            "append", "count", "getArrayCopy", "getIterator", "offsetExists",
            "offsetGet", "offsetSet", "offsetUnset",
        ],
    },
    {"name": "ArrayIterator", "methods": ["current", "key", "next", "rewind", "valid", "count"]},
    {
        "name": "Closure",
        "methods": [
            {"name": "bind", "static": True,
             "parameters": ["closure", "newThis", {"name": "newScope", "default": "static"}]},
            {"name": "fromCallable", "static": True, "parameters": ["callback"]},
            "bindTo", "call",
        ],
    },
    {
        "name": "DOMNode",
        "methods": [
            "appendChild", "cloneNode", "hasAttributes", "hasChildNodes",
            "insertBefore", "removeChild", "replaceChild",
            {"name": "C14N", "parameters": [
                {"name": "exclusive", "default": False},
                {"name": "withComments", "default": False},
                {"name": "xpath", "default": None},
                {"name": "nsPrefixes", "default": None},
            ]},
        ],
        "properties": [
            "nodeName", "nodeValue", "nodeType", "parentNode", "childNodes",
            "firstChild", "lastChild", "textContent",
        ],
    },
    {
        "name": "DOMDocument",
        "parent": "DOMNode",
        "methods": [
            {"name": "__construct", "parameters": [
                {"name": "version", "default": "1.0"},
                {"name": "encoding", "default": ""},
            ]},
            {"name": "load", "parameters": ["filename", {"name": "options", "default": 0}]},
            {"name": "loadXML", "parameters": ["source", {"name": "options", "default": 0}]},
            {"name": "loadHTML", "parameters": ["source", {"name": "options", "default": 0}]},
            {"name": "save", "parameters": ["filename", {"name": "options", "default": 0}]},
            {"name": "saveXML", "parameters": [
                {"name": "node", "default": None}, {"name": "options", "default": 0},
            ]},
            {"name": "saveHTML", "parameters": [{"name": "node", "default": None}]},
            "createElement", "createTextNode", "getElementById",
            "getElementsByTagName", "importNode", "normalizeDocument", "validate",
        ],
        "properties": [
            "documentElement", "encoding", "formatOutput", "preserveWhiteSpace",
            "version", "xmlVersion",
        ],
    },
]

BUILTIN_FUNCTIONS: list[dict[str, Any]] = [
    {"name": "array_search", "parameters": ["needle", "haystack", {"name": "strict", "default": False}]},
    {"name": "array_map", "parameters": ["callback", "array"]},
    {"name": "array_merge", "parameters": []},
    {"name": "array_keys", "parameters": ["array"]},
    {"name": "array_values", "parameters": ["array"]},
    {"name": "array_filter", "parameters": ["array", {"name": "callback", "default": None}, {"name": "mode", "default": 0}]},
    {"name": "array_key_exists", "parameters": ["key", "array"]},
    {"name": "array_slice", "parameters": ["array", "offset", {"name": "length", "default": None}, {"name": "preserve_keys", "default": False}]},
    {"name": "array_unique", "parameters": ["array", {"name": "flags", "default": 2}]},
    {"name": "count", "parameters": ["value", {"name": "mode", "default": 0}]},
    {"name": "in_array", "parameters": ["needle", "haystack", {"name": "strict", "default": False}]},
    {"name": "implode", "parameters": ["separator", {"name": "array", "default": None}]},
    {"name": "explode", "parameters": ["separator", "string", {"name": "limit", "default": 9223372036854775807}]},
    {"name": "strlen", "parameters": ["string"]},
    {"name": "strpos", "parameters": ["haystack", "needle", {"name": "offset", "default": 0}]},
    {"name": "str_replace", "parameters": ["search", "replace", "subject"]},
    {"name": "substr", "parameters": ["string", "offset", {"name": "length", "default": None}]},
    {"name": "sprintf", "parameters": ["format"]},
    {"name": "json_encode", "parameters": ["value", {"name": "flags", "default": 0}, {"name": "depth", "default": 512}]},
    {"name": "json_decode", "parameters": ["json", {"name": "associative", "default": None}, {"name": "depth", "default": 512}, {"name": "flags", "default": 0}]},
    {"name": "preg_match", "parameters": ["pattern", "subject"]},
    {"name": "preg_quote", "parameters": ["str", {"name": "delimiter", "default": None}]},
    {"name": "var_dump", "parameters": ["value"]},
    {"name": "print_r", "parameters": ["value", {"name": "return", "default": False}]},
    {"name": "function_exists", "parameters": ["function"]},
    {"name": "class_exists", "parameters": ["class", {"name": "autoload", "default": True}]},
    {"name": "get_declared_classes"},
    {"name": "get_defined_constants", "parameters": [{"name": "categorize", "default": False}]},
    {"name": "get_defined_functions", "parameters": [{"name": "exclude_disabled", "default": True}]},
    {"name": "get_class_methods", "parameters": ["object_or_class"]},
    {"name": "microtime", "parameters": [{"name": "as_float", "default": False}]},
    {"name": "time"},
    {"name": "date", "parameters": ["format", {"name": "timestamp", "default": None}]},
    {"name": "error_reporting", "parameters": [{"name": "error_level", "default": None}]},
    {"name": "phpinfo", "parameters": [{"name": "flags", "default": -1}]},
    {"name": "ob_start", "parameters": [
        {"name": "callback", "default": None},
        {"name": "chunk_size", "default": 0},
        {"name": "flags", "default": 112},
    ]},
]

BUILTIN_CONSTANTS: dict[str, Any] = {
    "PHP_EOL": "\n",
    "PHP_VERSION": "7.4.0",
    "PHP_INT_MAX": 9223372036854775807,
    "PHP_INT_SIZE": 8,
    "DIRECTORY_SEPARATOR": "/",
    "E_ERROR": 1,
    "E_WARNING": 2,
    "E_NOTICE": 8,
    "E_ALL": 32767,
    "CASE_LOWER": 0,
    "CASE_UPPER": 1,
    "COUNT_NORMAL": 0,
    "COUNT_RECURSIVE": 1,
    "SORT_REGULAR": 0,
    "SORT_STRING": 2,
    "JSON_PRETTY_PRINT": 128,
    "JSON_THROW_ON_ERROR": 4194304,
    "M_PI": 3.141592653589793,
    "T_OPEN_TAG": 379,
    "T_INLINE_HTML": 321,
    "T_VARIABLE": 320,
    "T_STRING": 319,
    "T_WHITESPACE": 382,
    "T_NEW": 284,
    "T_CLONE": 285,
    "T_OBJECT_OPERATOR": 363,
    "T_DOUBLE_COLON": 387,
    "T_NS_SEPARATOR": 390,
}


def load_builtins(table: SymbolTable) -> None:
    """Declare the built-in classes, functions and constants in `table`."""
    for raw_class in BUILTIN_CLASSES:
        table.add_class(ClassDescriptor.model_validate(raw_class))
    for raw_function in BUILTIN_FUNCTIONS:
        table.add_function(FunctionDescriptor.model_validate(raw_function))
    for name, value in BUILTIN_CONSTANTS.items():
        table.define_constant(name, value)
