"""Different temperature sensor chips behind one common interface."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Union


class TemperatureSensor(ABC):
    """The interface every temperature sensor presents to its users."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Model name of the sensor."""

    @property
    @abstractmethod
    def unit(self) -> str:
        """Unit of the readings."""

    @property
    @abstractmethod
    def min_value(self) -> float:
        """Lowest temperature the sensor can measure."""

    @property
    @abstractmethod
    def max_value(self) -> float:
        """Highest temperature the sensor can measure."""

    @property
    @abstractmethod
    def last_read_time(self) -> int:
        """Seconds since the epoch of the last reading, 0 if never read."""

    @abstractmethod
    def read_temperature(self) -> float:
        """Take a reading and return it."""


@dataclass
class Ds18b20:
    """A simulated one-wire DS18B20 chip with its own native API."""

    name: ClassVar[str] = "DS18B20"
    unit: ClassVar[str] = "°C"
    min_value: ClassVar[float] = -55.0
    max_value: ClassVar[float] = 125.0
    simulated_value: ClassVar[float] = 24.2

    pin: int = 0
    last_value: float = 0.0
    last_read_time: int = 0

    def read_raw(self) -> float:
        """Take a reading, remembering its value and time."""
        self.last_value = self.simulated_value
        self.last_read_time = int(time.time())
        return self.last_value


@dataclass
class Lm75:
    """A simulated I2C LM75 chip with its own native API."""

    name: ClassVar[str] = "LM75"
    unit: ClassVar[str] = "°C"
    min_value: ClassVar[float] = -55.0
    max_value: ClassVar[float] = 125.0
    simulated_value: ClassVar[float] = 27.5

    i2c_address: int = 0
    last_value: float = 0.0
    last_read_time: int = 0

    def read_raw(self) -> float:
        """Take a reading, remembering its value and time."""
        self.last_value = self.simulated_value
        self.last_read_time = int(time.time())
        return self.last_value


class _ChipAdapter(TemperatureSensor):
    """Presents a chip's native attributes through the common interface."""

    def __init__(self, device: Union[Ds18b20, Lm75]) -> None:
        self.device = device

    @property
    def name(self) -> str:
        return self.device.name

    @property
    def unit(self) -> str:
        return self.device.unit

    @property
    def min_value(self) -> float:
        return self.device.min_value

    @property
    def max_value(self) -> float:
        return self.device.max_value

    @property
    def last_read_time(self) -> int:
        return self.device.last_read_time


class Ds18b20Adapter(_ChipAdapter):
    """Makes a DS18B20 usable as a TemperatureSensor."""

    def __init__(self, device: Optional[Ds18b20] = None) -> None:
        super().__init__(device if device is not None else Ds18b20())

    def read_temperature(self) -> float:
        return self.device.read_raw()


class Lm75Adapter(_ChipAdapter):
    """Makes an LM75 usable as a TemperatureSensor."""

    def __init__(self, device: Optional[Lm75] = None) -> None:
        super().__init__(device if device is not None else Lm75())

    def read_temperature(self) -> float:
        return self.device.read_raw()


def read_temperature(sensor: Optional[TemperatureSensor]) -> float:
    """Read any sensor through the common interface."""
    if sensor is None:
        raise TypeError("no temperature sensor given")
    return sensor.read_temperature()


def _describe(sensor: TemperatureSensor) -> str:
    return "\n".join(
        (
            f"  Name: {sensor.name}",
            f"  Unit: {sensor.unit}",
            f"  Min: {sensor.min_value:.2f}",
            f"  Max: {sensor.max_value:.2f}",
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sensor adapter demonstration."""
    sensors = {
        "DS18B20": Ds18b20Adapter(Ds18b20()),
        "LM75": Lm75Adapter(Lm75()),
    }
    blocks = [f"{label}:\n{_describe(sensor)}" for label, sensor in sensors.items()]
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())