# -*- coding: utf-8 -*-
import logging

import pytest

from evector.math import EuclideanVector
from evector.utils.formatter import (
    describe,
    format_magnitude,
    format_vector,
    print_info,
    print_magnitudes,
    print_num_dimensions,
)


@pytest.mark.parametrize("value, text", [
    (1.0, "1"),
    (-2.5, "-2.5"),
    (0.6, "0.6"),
    (1e6, "1e+06"),
    (1.0 / 3.0, "0.333333"),
    (float("inf"), "inf"),
    (float("nan"), "nan"),
])
def test_format_magnitude_matches_stream_output(value, text):
    assert format_magnitude(value) == text

def test_format_vector_default(vec_a):
    assert format_vector(vec_a) == "[1 2 3]"
    assert format_vector(EuclideanVector(1)) == "[0]"
    assert format_vector(EuclideanVector(0)) == "[]"

def test_format_vector_options(vec_a):
    opts = {"precision": 3, "separator": ", ", "open": "(", "close": ")"}
    assert format_vector(vec_a / 3, opts) == "(0.333, 0.667, 1)"

def test_describe_without_norm(vec_a):
    lines = describe(vec_a).splitlines()
    assert lines[0] == "Number of dimensions: 3"
    assert lines[1] == "Magnitudes: 1 2 3"
    assert lines[2] == "Euclidean norm = undefined"
    assert lines[3].startswith("Array memory address = 0x")

def test_describe_with_cached_norm():
    v = EuclideanVector.from_sequence([3.0, 4.0])
    v.euclidean_norm()
    assert "Euclidean norm = 5" in describe(v).splitlines()

def test_describe_moved_from(vec_a):
    EuclideanVector.move(vec_a)
    assert describe(vec_a) == "Null"

def test_print_helpers_log(vec_a, caplog):
    caplog.set_level(logging.INFO, logger="evector")
    assert print_magnitudes(vec_a) == "1 2 3"
    assert print_num_dimensions(vec_a) == "3"
    text = print_info(vec_a)
    assert text in caplog.text
    assert "1 2 3" in caplog.messages
