"""Helpers for decoding and encoding attribute labels.

A label maps attribute names to text-encoded real numbers, e.g.
``{"x": "1.5", "y": "-0.25"}``. The helpers here turn labels into numeric
attribute vectors and back.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

LabelValue = Union[str, int, float]
Label = Mapping[str, LabelValue]
AttributeVector = Dict[str, float]


class EditCostError(Exception):
    """Base class for errors raised by edit-cost models."""


class AttributeKeyError(EditCostError, KeyError):
    """A required attribute is missing from a label."""

    def __init__(self, key: str, label: Optional[Label] = None):
        self.key = key
        self.label = label
        super().__init__(key)

    def __str__(self) -> str:
        if self.label is None:
            return f"Missing attribute {self.key!r}"
        return f"Missing attribute {self.key!r} in label with keys {sorted(self.label)}"


class NumericParseError(EditCostError, ValueError):
    """An attribute value cannot be read as a finite real number."""

    def __init__(self, key: str, value):
        self.key = key
        self.value = value
        super().__init__(f"Attribute {key!r} has non-numeric value {value!r}")


def parse_attribute(label: Label, key: str) -> float:
    """Look up ``key`` in ``label`` and parse it as a finite float."""
    try:
        raw = label[key]
    except KeyError:
        raise AttributeKeyError(key, label) from None
    # bool is an int subclass but never a meaningful attribute value
    if isinstance(raw, bool):
        raise NumericParseError(key, raw)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise NumericParseError(key, raw) from None
    if not math.isfinite(value):
        raise NumericParseError(key, raw)
    return value


def decode_label(
    label: Label,
    keys: Optional[Iterable[str]] = None,
) -> AttributeVector:
    """Decode a label into an attribute vector.

    Args:
        label: Mapping from attribute name to numeric text
        keys: Attributes to decode (defaults to all keys of ``label``)

    Returns:
        Dict from attribute name to float, ordered like ``keys``
    """
    if keys is None:
        keys = label.keys()
    return {key: parse_attribute(label, key) for key in keys}


def decode_labels(
    labels: Sequence[Label],
    keys: Optional[Sequence[str]] = None,
) -> List[AttributeVector]:
    """Decode a collection of labels sharing one key set.

    The key set is taken from ``keys`` or, when omitted, from the first label.
    A label lacking one of those keys raises ``AttributeKeyError``.
    """
    if not labels:
        return []
    if keys is None:
        keys = list(labels[0].keys())
    return [decode_label(label, keys) for label in labels]


def encode_value(value: float) -> str:
    """Encode a float so that ``float(encode_value(v)) == v``."""
    return repr(float(value))


def encode_label(vector: Mapping[str, float]) -> Dict[str, str]:
    """Encode an attribute vector back into a text label."""
    return {key: encode_value(value) for key, value in vector.items()}


def euclidean_distance(
    label_a: Label,
    label_b: Label,
    keys: Optional[Iterable[str]] = None,
) -> float:
    """Euclidean distance between two labels over ``keys``.

    ``keys`` defaults to the attributes of ``label_a``; attributes present
    only in ``label_b`` are ignored.
    """
    if keys is None:
        keys = label_a.keys()
    total = 0.0
    for key in keys:
        diff = parse_attribute(label_a, key) - parse_attribute(label_b, key)
        total += diff * diff
    return math.sqrt(total)
