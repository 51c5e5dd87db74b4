"""
Pytest configuration and shared fixtures for jsnom tests.

Provides immutable test data fixtures built from the json.org JSON_checker
suite plus the basic value cases shared across test modules.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from jsnom import Array
from jsnom import Bool
from jsnom import ErrorKind
from jsnom import Null
from jsnom import Number
from jsnom import Object
from jsnom import String


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_kind: ErrorKind | None = None
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing, with the expected category.

    Cases from json.org JSON_checker plus the simplejson control character
    report.
    """
    unexpected = ErrorKind.UNEXPECTED_TOKEN
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        ('"A JSON payload should be an object or array, not a string."', None),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', ErrorKind.UNEXPECTED_END_OF_INPUT),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', unexpected),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', unexpected),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', unexpected),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', unexpected),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', ErrorKind.TRAILING_DATA),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', ErrorKind.TRAILING_DATA),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', unexpected),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            ErrorKind.TRAILING_DATA,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', unexpected),
        # https://json.org/JSON_checker/test/fail13.json
        (
            '{"Numbers cannot have leading zeroes": 013}',
            ErrorKind.INVALID_NUMBER,
        ),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', unexpected),
        # https://json.org/JSON_checker/test/fail15.json
        ('["Illegal backslash escape: \\x15"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", unexpected),
        # https://json.org/JSON_checker/test/fail17.json
        ('["Illegal backslash escape: \\017"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail18.json - SKIPPED (limit is 256)
        ('[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]', None),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', unexpected),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', unexpected),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', unexpected),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', unexpected),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', unexpected),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", unexpected),
        # https://json.org/JSON_checker/test/fail25.json
        ('["\ttab\tcharacter\tin\tstring\t"]', unexpected),
        # https://json.org/JSON_checker/test/fail26.json
        ('["tab\\   character\\   in\\  string\\  "]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail27.json
        ('["line\nbreak"]', unexpected),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail32.json
        (
            '{"Comma instead if closing brace": true,',
            ErrorKind.UNEXPECTED_END_OF_INPUT,
        ),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', unexpected),
        # https://code.google.com/archive/p/simplejson/issues/3
        ('["A\u001fZ control characters in string"]', unexpected),
    ]

    # Cases that are skipped with reasons
    skips = {
        1: "scalar roots are accepted",
        18: "nesting limit is 256 levels, not 19",
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            expected_kind=kind,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, (doc, kind) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers every variant of the value tree.
    """
    return [
        JsonTestCase("null value", "null", False, Null()),
        JsonTestCase("true boolean", "true", False, Bool(True)),
        JsonTestCase("false boolean", "false", False, Bool(False)),
        JsonTestCase("integer", "42", False, Number(42)),
        JsonTestCase("negative integer", "-17", False, Number(-17)),
        JsonTestCase("float", "3.14", False, Number(3.14)),
        JsonTestCase("empty string", '""', False, String("")),
        JsonTestCase("simple string", '"hello"', False, String("hello")),
        JsonTestCase("empty array", "[]", False, Array()),
        JsonTestCase("empty object", "{}", False, Object()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            Array([Number(1), Number(2), Number(3)]),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            Object({"key": String("value")}),
        ),
    ]
