from ftpp.observable_value import ObservableValue


def test_subscribers_receive_changes_in_order():
    observable = ObservableValue(10)
    log = []
    observable.subscribe(lambda v: log.append(f"Subscriber 1: Value changed to {v}"))

    assert observable.value == 10
    observable.value = 20
    observable.subscribe(lambda v: log.append(f"Subscriber 2: New value received: {v}"))
    observable.value = 30

    assert log == [
        "Subscriber 1: Value changed to 20",
        "Subscriber 1: Value changed to 30",
        "Subscriber 2: New value received: 30",
    ]
    assert observable.value == 30


def test_setting_same_value_does_not_notify():
    observable = ObservableValue("a")
    log = []
    observable.subscribe(log.append)
    observable.value = "a"
    assert log == []
    observable.value = "b"
    assert log == ["b"]