from patternlab.observer import (
    MAX_SUBSCRIBERS,
    AlarmSystemController,
    DoorSensor,
    MobileAppNotifier,
    Publisher,
    SmokeSensor,
    Subscriber,
    main,
)


def _recorder():
    received = []
    return received, Subscriber(lambda pub, info: received.append((pub, info)))


def test_notify_reaches_subscribers_in_order():
    order = []
    publisher = Publisher()
    publisher.subscribe(Subscriber(lambda pub, info: order.append(("a", info))))
    publisher.subscribe(Subscriber(lambda pub, info: order.append(("b", info))))
    publisher.notify_subscribers("event")
    assert order == [("a", "event"), ("b", "event")]


def test_update_receives_publisher():
    received, subscriber = _recorder()
    door = DoorSensor()
    door.subscribe(subscriber)
    door.trigger(True)
    assert received == [(door, "Door Opened")]


def test_subscriber_without_callback_ignores_events():
    publisher = Publisher()
    plain = Subscriber()
    received, recorder = _recorder()
    publisher.subscribe(plain)
    publisher.subscribe(recorder)
    publisher.notify_subscribers("x")
    assert [info for _, info in received] == ["x"]


def test_subscribe_limit():
    publisher = Publisher()
    results = [publisher.subscribe(Subscriber()) for _ in range(MAX_SUBSCRIBERS + 2)]
    assert results.count(True) == MAX_SUBSCRIBERS
    assert results[-1] is False
    assert len(publisher.subscribers) == MAX_SUBSCRIBERS


def test_unsubscribe_removes_only_that_subscriber():
    publisher = Publisher()
    first, second, third = Subscriber(), Subscriber(), Subscriber()
    for sub in (first, second, third):
        publisher.subscribe(sub)
    assert publisher.unsubscribe(second) is True
    assert publisher.subscribers == (first, third)


def test_unsubscribe_unknown_is_noop():
    publisher = Publisher()
    member = Subscriber()
    publisher.subscribe(member)
    assert publisher.unsubscribe(Subscriber()) is False
    assert publisher.subscribers == (member,)


def test_unsubscribed_receives_nothing():
    received, recorder = _recorder()
    sensor = SmokeSensor()
    sensor.subscribe(recorder)
    sensor.unsubscribe(recorder)
    sensor.trigger(True)
    assert received == []


def test_door_sensor_state_and_messages():
    received, recorder = _recorder()
    door = DoorSensor()
    door.subscribe(recorder)
    door.trigger(True)
    assert door.is_open is True
    door.trigger(False)
    assert door.is_open is False
    assert [info for _, info in received] == ["Door Opened", "Door Closed"]


def test_smoke_sensor_state_and_messages():
    received, recorder = _recorder()
    smoke = SmokeSensor()
    smoke.subscribe(recorder)
    smoke.trigger(True)
    assert smoke.smoke_detected is True
    smoke.trigger(False)
    assert smoke.smoke_detected is False
    assert [info for _, info in received] == ["Smoke Detected", "No Smoke"]


def test_concrete_subscribers_print(capsys):
    smoke = SmokeSensor()
    smoke.subscribe(MobileAppNotifier())
    smoke.subscribe(AlarmSystemController())
    smoke.trigger(True)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[MobileApp] Alert: Smoke Detected",
        "[AlarmSystem] Alarm: Smoke Detected",
    ]


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "== Simulate Door Open Event ==",
        "[MobileApp] Alert: Door Opened",
        "[AlarmSystem] Alarm: Door Opened",
    ]