"""Publish/subscribe between home sensors and notification subscribers."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, Tuple

MAX_SUBSCRIBERS = 10

UpdateCallback = Callable[["Publisher", str], None]


class Subscriber:
    """Receives event notifications from publishers.

    A plain subscriber forwards each event to ``callback`` when one is given
    and ignores events otherwise; subclasses override :meth:`update`.
    """

    def __init__(self, callback: Optional[UpdateCallback] = None) -> None:
        self.callback = callback

    def update(self, publisher: "Publisher", event_info: str) -> None:
        """Handle an event announced by ``publisher``."""
        if self.callback is not None:
            self.callback(publisher, event_info)


class Publisher:
    """Keeps up to ``MAX_SUBSCRIBERS`` subscribers and notifies them in order."""

    max_subscribers = MAX_SUBSCRIBERS

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> bool:
        """Add ``subscriber``; return False if the publisher is already full."""
        if len(self._subscribers) >= self.max_subscribers:
            return False
        self._subscribers.append(subscriber)
        return True

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        """Remove the first registration of ``subscriber``; return whether found."""
        for index, existing in enumerate(self._subscribers):
            if existing is subscriber:
                del self._subscribers[index]
                return True
        return False

    def notify_subscribers(self, event_info: str) -> None:
        """Pass ``event_info`` to every subscriber in subscription order."""
        for subscriber in list(self._subscribers):
            subscriber.update(self, event_info)


class DoorSensor(Publisher):
    """Announces the door opening and closing."""

    def __init__(self) -> None:
        super().__init__()
        self.is_open = False

    def trigger(self, is_open: bool) -> None:
        self.is_open = bool(is_open)
        self.notify_subscribers("Door Opened" if self.is_open else "Door Closed")


class SmokeSensor(Publisher):
    """Announces whether smoke is detected."""

    def __init__(self) -> None:
        super().__init__()
        self.smoke_detected = False

    def trigger(self, detected: bool) -> None:
        self.smoke_detected = bool(detected)
        self.notify_subscribers("Smoke Detected" if self.smoke_detected else "No Smoke")


class MobileAppNotifier(Subscriber):
    """Shows events as mobile app alerts."""

    def __init__(self) -> None:
        super().__init__()

    def update(self, publisher: Publisher, event_info: str) -> None:
        print(f"[MobileApp] Alert: {event_info}")


class AlarmSystemController(Subscriber):
    """Passes events on to the alarm system."""

    def __init__(self) -> None:
        super().__init__()

    def update(self, publisher: Publisher, event_info: str) -> None:
        print(f"[AlarmSystem] Alarm: {event_info}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the smart home notification demonstration."""
    del argv
    door_sensor = DoorSensor()
    smoke_sensor = SmokeSensor()
    mobile_app = MobileAppNotifier()
    alarm_system = AlarmSystemController()

    for sensor in (door_sensor, smoke_sensor):
        sensor.subscribe(mobile_app)
        sensor.subscribe(alarm_system)

    print("== Simulate Door Open Event ==")
    door_sensor.trigger(True)
    return 0


if __name__ == "__main__":
    sys.exit(main())