"""Property-based tests for processor invariants."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_validate import (
    Err,
    Ok,
    Reason,
    as_boolean,
    as_number,
    as_string,
    is_array,
    is_boolean,
    is_number,
    is_object,
    is_string,
    maybe_as_number,
    maybe_as_string,
    maybe_boolean,
    maybe_number,
    maybe_string,
)
from tests.strategies import json_values, non_numeric_texts, numbers, numeric_texts, present_values

REQUIRED = [is_number, is_string, is_boolean, as_number, as_string, as_boolean, is_array]
OPTIONAL = [maybe_number, maybe_string, maybe_boolean, maybe_as_number, maybe_as_string]
STRICT_OPTIONAL = [
    (maybe_number, lambda value: isinstance(value, (int, float)) and not isinstance(value, bool)),
    (maybe_string, lambda value: isinstance(value, str)),
    (maybe_boolean, lambda value: isinstance(value, bool)),
]


@pytest.mark.parametrize('builder', REQUIRED)
def test_required_processors_reject_none(builder):
    """Required processors without a default report not-defined for None."""
    result = builder().process(None)
    assert isinstance(result, Err)
    assert [issue.reason for issue in result.issues] == [Reason.NOT_DEFINED]


@pytest.mark.parametrize('builder', OPTIONAL)
def test_optional_processors_accept_none(builder):
    """Optional processors turn None into Ok(None)."""
    assert builder().process(None) == Ok(None)


@pytest.mark.hypothesis_property
@pytest.mark.parametrize(('builder', 'matches'), STRICT_OPTIONAL)
@given(value=present_values)
def test_incorrect_type_to_undefined_never_fails(builder, matches, value):
    """Wrong-typed input to a masking optional processor is always absent."""
    if matches(value):
        return
    assert builder(incorrect_type_to_undefined=True).process(value) == Ok(None)


@pytest.mark.hypothesis_property
@given(text=non_numeric_texts)
def test_unconvertible_text_is_masked_unless_strict(text):
    """Lenient optional conversion masks, strict conversion reports."""
    assert maybe_as_number().process(text) == Ok(None)
    result = maybe_as_number(strict_parsing=True).process(text)
    assert isinstance(result, Err)
    assert [issue.reason for issue in result.issues] == [Reason.NO_CONVERSION]


@pytest.mark.hypothesis_property
@given(text=numeric_texts)
def test_numeric_text_converts(text):
    """Numeric text converts to the number it spells."""
    assert as_number().process(text) == Ok(float(text))


@pytest.mark.hypothesis_property
@given(value=numbers, low=numbers, high=numbers)
def test_clamping_stays_in_bounds(value, low, high):
    """Clamped numbers land inside the coercion bounds."""
    low, high = min(low, high), max(low, high)
    result = is_number(coerce_min=low, coerce_max=high).process(value)
    assert low <= result.unwrap() <= high


@pytest.mark.hypothesis_property
@given(value=numbers)
def test_processing_is_idempotent(value):
    """Feeding a result back in yields the same result."""
    processor = as_number(coerce_min=-100, coerce_max=100)
    first = processor.process(value).unwrap()
    assert processor.process(first) == Ok(first)


@pytest.mark.hypothesis_property
@given(value=json_values)
def test_processors_never_raise(value):
    """Arbitrary JSON-like input yields a Result, never an exception."""
    processors = [
        is_number(min=0),
        maybe_as_number(strict_parsing=True),
        as_string(min_length=1),
        maybe_as_string(),
        as_boolean(),
        is_array(maybe_as_number()),
        is_object({'a': maybe_string(), 'b': is_array()}),
    ]
    for processor in processors:
        assert isinstance(processor.process(value), (Ok, Err))


@pytest.mark.hypothesis_property
@given(values=st.lists(json_values, max_size=10))
def test_array_issues_point_at_elements(values):
    """Every element issue is path-qualified by a valid index."""
    result = is_array(is_number()).process(values)
    if isinstance(result, Err):
        for issue in result.issues:
            assert 0 <= issue.path[0] < len(values)
            assert issue.value is values[issue.path[0]] or issue.value == values[issue.path[0]]
    else:
        assert result.value == values


@pytest.mark.hypothesis_property
@given(value=json_values)
def test_construction_is_pure(value):
    """Processing does not alter the processor or its options."""
    processor = maybe_as_number(min=0, strict_parsing=True)
    before = repr(processor), processor.pipeline
    processor.process(value)
    assert (repr(processor), processor.pipeline) == before


@pytest.mark.hypothesis_property
@given(value=json_values)
def test_identical_builds_behave_identically(value):
    """Two processors built from the same arguments agree on every input."""
    builds = [
        lambda: maybe_as_number(min=0, coerce_max=10, strict_parsing=True),
        lambda: is_array(is_number(min=25), min_length=1),
        lambda: maybe_as_string(trim=True, max_length=3),
    ]
    for build in builds:
        first, second = build(), build()
        assert first is not second
        assert first.process(value) == second.process(value)
