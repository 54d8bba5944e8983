"""Unit tests for computed observable behavior."""

import logging

import pytest

from reactodo import ComputationError, ComputedObservable, Observable


@pytest.mark.unit
@pytest.mark.observable
def test_then_method_returns_computed_observable_instances():
    """then() method returns ComputedObservable instances"""
    base = Observable("base", 10)
    result = base.then(lambda x: x * 2)

    assert isinstance(result, ComputedObservable)
    assert result.value == 20


@pytest.mark.unit
@pytest.mark.observable
def test_rshift_operator_chains_transforms():
    base = Observable("base", 2)

    result = base >> (lambda x: x + 1) >> (lambda x: x * 3)

    assert result.value == 9
    base.set(3)
    assert result.value == 12


@pytest.mark.unit
@pytest.mark.observable
def test_computed_observable_prevents_direct_modification():
    """Computed observables cannot be set directly (readonly protection)"""
    computed_obs = Observable("base", 10) >> (lambda x: x * 2)

    with pytest.raises(TypeError, match="derived"):
        computed_obs.set(50)


@pytest.mark.unit
@pytest.mark.observable
def test_computed_requires_a_source():
    with pytest.raises(ValueError):
        ComputedObservable("lonely", lambda: 1)


@pytest.mark.unit
@pytest.mark.observable
def test_computed_is_lazy_until_read():
    """Nothing is computed before the first read"""
    calls = []
    base = Observable("base", 1)
    doubled = ComputedObservable("doubled", lambda x: calls.append(x) or x * 2, base)

    assert calls == []
    assert doubled.value == 2
    assert calls == [1]


@pytest.mark.unit
@pytest.mark.observable
def test_computed_memoizes_on_input_identity():
    """Repeated reads with the same input object don't recompute"""
    # Arrange
    snapshot = (1, 2, 3)
    base = Observable("base", snapshot)
    total = ComputedObservable("total", sum, base)

    # Act
    total.value
    total.value
    base.set(snapshot)  # same object swapped back in
    total.value

    # Assert
    assert total.compute_count == 1


@pytest.mark.unit
@pytest.mark.observable
def test_computed_recomputes_when_input_reference_changes():
    """An equal but distinct input object triggers recomputation"""
    base = Observable("base", [1, 2])
    total = ComputedObservable("total", sum, base)

    total.value
    base.set([1, 2])
    total.value

    assert total.compute_count == 2


@pytest.mark.unit
@pytest.mark.observable
def test_computed_with_multiple_sources_receives_values_in_order():
    width = Observable("width", 10)
    height = Observable("height", 5)
    area = ComputedObservable("area", lambda w, h: w * h, width, height)

    assert area.value == 50
    width.set(20)
    assert area.value == 100
    height.set(1)
    assert area.value == 20


@pytest.mark.unit
@pytest.mark.observable
def test_subscribed_computed_notifies_only_when_value_changes():
    """Subscribers of a derived value hear about real changes only"""
    # Arrange
    words = Observable("words", ("a", "b"))
    count = words >> len
    received = []
    count.subscribe(received.append)

    # Act
    words.set(("c", "d"))  # same length
    words.set(("c", "d", "e"))

    # Assert
    assert received == [3]


@pytest.mark.unit
@pytest.mark.observable
def test_computed_notification_not_lost_when_value_read_early():
    """A subscriber reading the derived value first doesn't swallow the change"""
    # Arrange - source subscriber registered before the computed attaches
    words = Observable("words", ("a",))
    count = words >> len
    words.subscribe(lambda _: count.value)
    received = []
    count.subscribe(received.append)

    # Act
    words.set(("a", "b"))

    # Assert
    assert received == [2]


@pytest.mark.unit
@pytest.mark.observable
def test_computed_of_computed_propagates():
    base = Observable("base", 1)
    plus_one = base >> (lambda x: x + 1)
    doubled = ComputedObservable("doubled", lambda x: x * 2, plus_one)
    received = []
    doubled.subscribe(received.append)

    base.set(4)

    assert received == [10]


@pytest.mark.unit
@pytest.mark.observable
def test_computation_errors_are_wrapped():
    """Exceptions raised by the derived function surface as ComputationError"""
    base = Observable("base", 0)
    inverse = ComputedObservable("inverse", lambda x: 1 / x, base)

    with pytest.raises(ComputationError, match="inverse"):
        inverse.value


@pytest.mark.unit
@pytest.mark.observable
def test_repr_reports_virtual_and_tracked_states():
    base = Observable("base", 1)
    doubled = ComputedObservable("doubled", lambda x: x * 2, base)

    assert "virtual" in repr(doubled)
    doubled.subscribe(lambda _: None)
    assert repr(doubled) == "ComputedObservable(doubled=2, tracked)"


@pytest.mark.unit
@pytest.mark.observable
def test_last_unsubscribe_detaches_computed_from_its_sources():
    """A derived value with no subscribers left goes back to virtual"""
    # Arrange
    base = Observable("base", 1)
    doubled = ComputedObservable("doubled", lambda x: x * 2, base)
    unsubscribe = doubled.subscribe(lambda _: None)
    assert base.subscriber_count == 1

    # Act
    unsubscribe()

    # Assert
    assert base.subscriber_count == 0
    assert "virtual" in repr(doubled)
    base.set(5)
    assert doubled.value == 10


@pytest.mark.unit
@pytest.mark.observable
def test_detach_waits_for_the_last_subscriber():
    base = Observable("base", 1)
    doubled = ComputedObservable("doubled", lambda x: x * 2, base)
    received = []
    first = doubled.subscribe(lambda _: None)
    doubled.subscribe(received.append)

    first()
    base.set(2)

    assert base.subscriber_count == 1
    assert received == [4]


@pytest.mark.unit
@pytest.mark.observable
def test_resubscribing_hears_change_back_to_previous_value():
    """A new subscriber is compared against the value it started from"""
    # Arrange - emit 4, then leave while the value changes elsewhere
    base = Observable("base", (1, 2, 3))
    count = base >> len
    unsubscribe = count.subscribe(lambda _: None)
    base.set((1, 2, 3, 4))
    unsubscribe()
    base.set((1, 2))
    received = []
    count.subscribe(received.append)

    # Act
    base.set((1, 2, 3))

    # Assert
    assert received == [3]


@pytest.mark.unit
@pytest.mark.observable
def test_failing_derived_subscriber_does_not_block_later_listeners(caplog):
    """A ComputationError while notifying is logged and the round continues"""
    # Arrange
    base = Observable("base", 1)
    inverse = ComputedObservable("inverse", lambda x: 1 / x, base)
    inverse.subscribe(lambda _: None)
    received = []
    base.subscribe(received.append)

    # Act
    with caplog.at_level(logging.ERROR, logger="reactodo.observable"):
        base.set(0)

    # Assert
    assert received == [0]
    assert base.value == 0
    assert "inverse" in caplog.text
