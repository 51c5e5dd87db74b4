"""
Benchmark suite for jsnom JSON parsing performance.

Compares jsnom against standard JSON libraries including:
- Python standard library json
- orjson
- ujson

Not collected by default; run ``pytest benchmarks/`` explicitly.
"""
