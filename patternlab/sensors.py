"""Simulated sensors made by a factory according to their type."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Dict, Optional, Sequence, Type


class SensorType(Enum):
    """The kinds of sensor the factory can make."""

    TEMPERATURE = 0
    HUMIDITY = 1
    LIGHT = 2


class Sensor:
    """A sensor that can be initialised and read."""

    name = "Generic"
    value = 0.0

    def init(self) -> None:
        """Announce that the sensor is ready."""
        print(f"{self.name} sensor initialized.")

    def read_data(self) -> float:
        """Return the sensor's reading."""
        return self.value


class TemperatureSensor(Sensor):
    """Reads temperature in degrees Celsius."""

    name = "Temperature"
    value = 25.5


class HumiditySensor(Sensor):
    """Reads relative humidity in percent."""

    name = "Humidity"
    value = 60.0


class LightSensor(Sensor):
    """Reads light intensity in lux."""

    name = "Light"
    value = 300.0


_SENSOR_CLASSES: Dict[SensorType, Type[Sensor]] = {
    SensorType.TEMPERATURE: TemperatureSensor,
    SensorType.HUMIDITY: HumiditySensor,
    SensorType.LIGHT: LightSensor,
}


def create_sensor(sensor_type: SensorType) -> Sensor:
    """Make a new sensor of ``sensor_type``; raise ValueError for unknown types."""
    try:
        return _SENSOR_CLASSES[SensorType(sensor_type)]()
    except (KeyError, ValueError):
        raise ValueError(f"Unknown sensor type: {sensor_type!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sensor factory demonstration."""
    del argv
    for sensor_type, label in (
        (SensorType.TEMPERATURE, "Temperature: {:.2f}°C"),
        (SensorType.HUMIDITY, "Humidity: {:.2f}%"),
        (SensorType.LIGHT, "Light Intensity: {:.2f} lux"),
    ):
        sensor = create_sensor(sensor_type)
        sensor.init()
        print(label.format(sensor.read_data()))
    return 0


if __name__ == "__main__":
    sys.exit(main())