"""Input document: a JSON object with a "testcases" array.

Each test case looks like

    {"keys": {"n": 3, "k": 3},
     "1": {"base": "10", "value": "2"},
     "2": {"base": "2", "value": "11"}, ...}

The outer shape is checked by read_document (DocumentError aborts the run);
each case is checked separately by parse_case (InvalidCase fails only that
case).
"""

import json
from dataclasses import dataclass, field as datafield
from pathlib import Path

from core.errors import DocumentError, InvalidCase


@dataclass(frozen=True)
class RootEntry:
    base: int | str
    value: str


@dataclass(frozen=True)
class TestCase:
    __test__ = False  # not a pytest class

    index: int
    n: int
    k: int
    entries: dict[int, RootEntry] = datafield(default_factory=dict)

    @property
    def degree(self) -> int:
        return self.k - 1


def read_document(path) -> list:
    """Load the raw test case list from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise DocumentError(f"{path} not found")
    try:
        doc = json.loads(path.read_text(encoding='utf-8'))
    except ValueError as e:
        raise DocumentError(f"{path} is not valid JSON: {e}") from e
    return cases_of(doc)


def cases_of(doc) -> list:
    if not isinstance(doc, dict):
        raise DocumentError("document must be a JSON object")
    tests = doc.get('testcases')
    if not isinstance(tests, list) or not tests:
        raise DocumentError(
            'no testcases found (expecting a non-empty "testcases" array)')
    return tests


def _require_int(keys: dict, name: str) -> int:
    v = keys.get(name)
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidCase(f"missing or invalid keys.{name}")
    return v


def _parse_entry(raw, key: int) -> RootEntry:
    if not isinstance(raw, dict) or 'base' not in raw or 'value' not in raw:
        raise InvalidCase(f"entry {key} must have base and value")
    base, value = raw['base'], raw['value']
    if isinstance(base, bool) or not isinstance(base, (int, str)):
        raise InvalidCase(f"entry {key} base must be an integer or text")
    if not isinstance(value, str):
        raise InvalidCase(f"entry {key} value must be text")
    return RootEntry(base, value)


def _is_absent(entry) -> bool:
    """Falsy JSON values (null, false, 0, NaN, "") mark a left-out entry."""
    if entry is None or entry is False or entry == "":
        return True
    if isinstance(entry, float):
        return entry == 0 or entry != entry
    return isinstance(entry, int) and entry == 0


def _entry_keys(raw: dict, n: int):
    """Integer keys 1..n present in the case, spelled exactly "1".."n"."""
    for name in raw:
        if not isinstance(name, str) or not name.isdecimal():
            continue
        # n has at most bit_length // 3 + 1 decimal digits.
        if len(name) > n.bit_length() // 3 + 1:
            continue
        key = int(name)
        if str(key) == name and 1 <= key <= n and not _is_absent(raw[name]):
            yield key


def parse_case(raw, index: int) -> TestCase:
    """Validate one raw test case (0-based index) into a TestCase."""
    if not isinstance(raw, dict):
        raise InvalidCase("test case must be a JSON object")
    keys = raw.get('keys')
    if not isinstance(keys, dict):
        raise InvalidCase("missing or invalid keys.n / keys.k")
    n = _require_int(keys, 'n')
    k = _require_int(keys, 'k')
    if n < 0:
        raise InvalidCase("keys.n must be >= 0")
    if k < 1:
        raise InvalidCase("keys.k must be >= 1")

    entries = {key: _parse_entry(raw[str(key)], key)
               for key in sorted(_entry_keys(raw, n))}
    return TestCase(index, n, k, entries)
