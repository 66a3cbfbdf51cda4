"""Declarative request validation.

A route declares an ordered tuple of ``FieldRule`` descriptors.  Each rule
names one request field (from the JSON body or the URL path) and carries a
chain of ``Check`` objects.  ``validate_request`` runs every check of every
rule and collects all failures, so a single field may contribute several
errors.

Checks operate on the string form of the raw value: ``None`` or an absent
field become ``""`` and booleans become ``"true"`` / ``"false"``.  Custom
predicates receive the raw value instead.

Error items have the shape::

    {"type": "field", "value": "abc", "msg": "...", "path": "price", "location": "body"}

``value`` is omitted when the field is absent from the request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

BODY = "body"
PARAMS = "params"

_MISSING = object()

_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT_RE = re.compile(r"[-+]?[0-9]+")
_BOOLEAN_LITERALS = frozenset({"true", "false", "1", "0"})


def as_text(value: Any) -> str:
    """Return the string form used by the built-in checks."""
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Check:
    """A single predicate over a field value plus its failure message."""

    predicate: Callable[[Any], bool]
    message: str
    raw: bool = False

    def passes(self, value: Any) -> bool:
        if self.raw:
            return bool(self.predicate(None if value is _MISSING else value))
        return bool(self.predicate(as_text(value)))


@dataclass(frozen=True)
class FieldRule:
    """Ordered chain of checks bound to one request field."""

    field: str
    checks: Tuple[Check, ...] = ()
    location: str = BODY

    def evaluate(self, value: Any) -> List[Dict[str, Any]]:
        errors = []
        for check in self.checks:
            if check.passes(value):
                continue
            error: Dict[str, Any] = {"type": "field"}
            if value is not _MISSING:
                error["value"] = value
            error.update(msg=check.message, path=self.field, location=self.location)
            errors.append(error)
        return errors


# ---------------------------------------------------------------------------
# Check factories
# ---------------------------------------------------------------------------


def not_empty(message: str) -> Check:
    return Check(lambda text: text != "", message)


def is_numeric(message: str) -> Check:
    return Check(lambda text: bool(_NUMERIC_RE.fullmatch(text)), message)


def is_int(message: str) -> Check:
    return Check(lambda text: bool(_INT_RE.fullmatch(text)), message)


def is_boolean(message: str) -> Check:
    return Check(lambda text: text in _BOOLEAN_LITERALS, message)


def max_length(limit: int, message: str) -> Check:
    return Check(lambda text: len(text) <= limit, message)


def custom(predicate: Callable[[Any], bool], message: str) -> Check:
    """Wrap an arbitrary predicate; it receives the raw value (``None`` when absent)."""
    return Check(predicate, message, raw=True)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _lookup(source: Any, name: str) -> Any:
    if isinstance(source, Mapping) and name in source:
        return source[name]
    return _MISSING


def validate_request(
    rules: Sequence[FieldRule],
    body: Any,
    params: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Evaluate ``rules`` in order and return every collected error."""
    sources = {BODY: body, PARAMS: params or {}}
    errors: List[Dict[str, Any]] = []
    for rule in rules:
        errors.extend(rule.evaluate(_lookup(sources[rule.location], rule.field)))
    return errors
