"""
Test documents for jsnom parsing benchmarks.

Each generator is seeded, so every run and every library parses the same
bytes:
- small and large objects
- number-heavy arrays
- deep nesting close to the default depth limit
- escape- and non-ASCII-heavy strings
"""

import json
import random
import string
from typing import Any

_SEED = 1729
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t", "\\u00e9"]


def generate_test_data(data_type: str) -> bytes:
    """Returns the UTF-8 encoded benchmark document of the given type."""
    generators = {
        "small_object": _small_object,
        "large_object": _large_object,
        "number_array": _number_array,
        "deep_nesting": _deep_nesting,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED)).encode("utf-8")


def _small_object(rng: random.Random) -> str:
    data = {
        "id": rng.randint(1, 99999),
        "name": "Ada Lovelace",
        "active": True,
        "ratio": 0.625,
        "tags": ["math", "engines", None],
        "meta": {"created": "1843-07-10T00:00:00Z"},
    }
    return json.dumps(data)


def _large_object(rng: random.Random) -> str:
    """A configuration-like document of roughly 30KB."""
    data: dict[str, Any] = {
        f"service_{i}": {
            "host": f"10.0.{i % 256}.{rng.randint(1, 254)}",
            "port": rng.randint(1024, 65535),
            "enabled": rng.random() < 0.8,
            "weights": [round(rng.uniform(0, 1), 4) for _ in range(5)],
            "owner": _word(rng, 12),
            "fallback": None,
        }
        for i in range(150)
    }
    return json.dumps(data)


def _number_array(rng: random.Random) -> str:
    values: list[float | int] = []
    for _ in range(2000):
        if rng.random() < 0.5:
            values.append(rng.randint(-(10**9), 10**9))
        else:
            values.append(rng.uniform(-1e6, 1e6))
    return json.dumps(values)


def _deep_nesting(rng: random.Random) -> str:
    depth = 200
    opening = "".join(rng.choice(['{"k":', "["]) for _ in range(depth))
    closing = "".join("}" if c == "{" else "]" for c in reversed(opening) if c in "{[")
    return opening + "0" + closing


def _string_heavy(rng: random.Random) -> str:
    def escaped(length: int) -> str:
        parts = []
        for _ in range(length):
            if rng.random() < 0.3:
                parts.append(rng.choice(_ESCAPES))
            else:
                parts.append(rng.choice(string.ascii_letters + " ü日"))
        return '"' + "".join(parts) + '"'

    members = ", ".join(f'"key_{i}": {escaped(60)}' for i in range(200))
    return "{" + members + "}"


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_lowercase, k=length))
