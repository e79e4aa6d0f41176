"""
Tests for Container: final state, pour legality and the pour itself.

Usage:
    pytest tests/test_container.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from colorsort.solver import Container, CapacityError, InvalidTransfusionError


A, B, X, Y = "A", "B", "X", "Y"


def test_capacity_is_enforced_on_construction():
    """More layers than capacity is rejected, never truncated."""
    with pytest.raises(CapacityError):
        Container([1, 2, 3, 4, 5], capacity=4)

    full = Container([1, 2, 3, 4], capacity=4)
    assert len(full) == 4
    assert full.is_full


def test_capacity_error_is_a_value_error():
    with pytest.raises(ValueError):
        Container([1, 1, 1], capacity=2)


@pytest.mark.parametrize("layers, expected", [
    ([], True),
    ([X, X, X, X], True),
    ([X, X], False),
    ([X, Y, X, Y], False),
])
def test_final_state(layers, expected):
    assert Container(layers, capacity=4).is_in_final_state is expected


def test_predicates_and_top_run():
    container = Container([A, B, B], capacity=4)

    assert not container.is_empty
    assert not container.is_full
    assert container.top == B
    assert container.top_run_length == 2
    assert container.free_capacity == 1

    empty = Container(capacity=4)
    assert empty.is_empty
    assert empty.top is None
    assert empty.top_run_length == 0
    assert empty.free_capacity == 4


def test_transfusion_moves_whole_top_run_when_space_allows():
    """[A,B,B] into [B] with capacity 4 moves 2 layers."""
    source = Container([A, B, B], capacity=4)
    destination = Container([B], capacity=4)

    assert Container.is_transfusion_valid(source, destination)
    moved = Container.transfuse(source, destination)

    assert moved == 2
    assert source.layers == [A]
    assert destination.layers == [B, B, B]


def test_transfusion_is_limited_by_free_capacity():
    source = Container([2, 1, 1, 1], capacity=4)
    destination = Container([2, 2, 1], capacity=4)

    moved = Container.transfuse(source, destination)

    assert moved == 1
    assert source.layers == [2, 1, 1]
    assert destination.layers == [2, 2, 1, 1]


def test_transfusion_into_empty_container():
    source = Container([1, 2, 2, 2], capacity=4)
    destination = Container(capacity=4)

    assert Container.transfuse(source, destination) == 3
    assert source.layers == [1]
    assert destination.layers == [2, 2, 2]


@pytest.mark.parametrize("source, destination", [
    ([A, B], [B, A]),          # top colors differ
    ([], [A]),                 # empty source
    ([A], [A, A, A, A]),       # full destination
])
def test_illegal_transfusions(source, destination):
    source = Container(source, capacity=4)
    destination = Container(destination, capacity=4)

    assert not Container.is_transfusion_valid(source, destination)


def test_illegal_transfusion_raises_and_leaves_containers_untouched():
    source = Container([A, B], capacity=4)
    destination = Container([B, A], capacity=4)

    with pytest.raises(InvalidTransfusionError):
        Container.transfuse(source, destination)

    assert source.layers == [A, B]
    assert destination.layers == [B, A]


def test_validity_check_does_not_mutate():
    source = Container([A, B, B], capacity=4)
    destination = Container([B], capacity=4)

    Container.is_transfusion_valid(source, destination)

    assert source.layers == [A, B, B]
    assert destination.layers == [B]


def test_copy_is_independent():
    original = Container([A, B, B], capacity=4)
    clone = original.copy()
    destination = Container(capacity=4)

    Container.transfuse(clone, destination)

    assert original.layers == [A, B, B]
    assert clone.layers == [A]
    assert clone != original


def test_layers_property_returns_a_copy():
    container = Container([1, 2], capacity=4)
    layers = container.layers
    layers.append(3)

    assert container.layers == [1, 2]


def test_string_form_is_comma_joined():
    assert str(Container([1, 2, 2], capacity=4)) == "1,2,2"
    assert str(Container(capacity=4)) == ""
