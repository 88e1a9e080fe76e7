# tests/test_labels.py
import math

import pytest

from ged_costs.labels import (
    AttributeKeyError,
    EditCostError,
    NumericParseError,
    decode_label,
    decode_labels,
    encode_label,
    euclidean_distance,
    parse_attribute,
)


class TestParseAttribute:

    @pytest.mark.parametrize("raw,expected", [
        ("1.5", 1.5),
        ("-3", -3.0),
        ("  2e3 ", 2000.0),
        (4, 4.0),
        (0.25, 0.25),
    ])
    def test_parses_numbers(self, raw, expected):
        assert parse_attribute({"x": raw}, "x") == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1,5", None, "nan", "inf", True])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(NumericParseError) as excinfo:
            parse_attribute({"x": raw}, "x")
        assert excinfo.value.key == "x"
        assert excinfo.value.value == raw

    def test_missing_key(self):
        with pytest.raises(AttributeKeyError) as excinfo:
            parse_attribute({"x": "1"}, "y")
        assert excinfo.value.key == "y"
        assert "'y'" in str(excinfo.value)

    def test_error_hierarchy(self):
        assert issubclass(AttributeKeyError, KeyError)
        assert issubclass(NumericParseError, ValueError)
        assert issubclass(AttributeKeyError, EditCostError)
        assert issubclass(NumericParseError, EditCostError)


class TestDecodeEncode:

    def test_decode_label(self):
        assert decode_label({"x": "1", "y": "2.5"}) == {"x": 1.0, "y": 2.5}

    def test_decode_label_subset(self):
        label = {"x": "1", "y": "2", "color": "red"}
        assert decode_label(label, ["x", "y"]) == {"x": 1.0, "y": 2.0}

    def test_decode_labels_uses_first_key_set(self):
        labels = [{"a": "1", "b": "2"}, {"b": "4", "a": "3", "c": "9"}]
        assert decode_labels(labels) == [{"a": 1.0, "b": 2.0}, {"a": 3.0, "b": 4.0}]

    def test_decode_labels_missing_key(self):
        with pytest.raises(AttributeKeyError):
            decode_labels([{"a": "1", "b": "2"}, {"a": "3"}])

    def test_decode_labels_empty(self):
        assert decode_labels([]) == []

    def test_encode_is_exact(self):
        vector = {"x": 1 / 3, "y": -2.0, "z": 1e-12}
        encoded = encode_label(vector)

        assert all(isinstance(value, str) for value in encoded.values())
        assert decode_label(encoded) == vector


class TestEuclideanDistance:

    def test_three_four_five(self):
        a = {"x": "0", "y": "0"}
        b = {"x": "3", "y": "4"}
        assert euclidean_distance(a, b) == pytest.approx(5.0)

    def test_ignores_keys_only_in_second_label(self):
        a = {"x": "1"}
        b = {"x": "2", "y": "100"}
        assert euclidean_distance(a, b) == pytest.approx(1.0)

    def test_explicit_keys(self):
        a = {"x": "1", "y": "1", "z": "50"}
        b = {"x": "2", "y": "2"}
        assert euclidean_distance(a, b, ["x", "y"]) == pytest.approx(math.sqrt(2))

    def test_empty_labels(self):
        assert euclidean_distance({}, {}) == 0.0
