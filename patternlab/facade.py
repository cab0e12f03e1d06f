"""One simple interface over the lighting, security and climate systems."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence


def _announce(message: str) -> str:
    print(message)
    return message


class LightingSystem:
    """Controls the lights; each action returns the message it printed."""

    def turn_on(self) -> str:
        return _announce("Lights turned on.")

    def turn_off(self) -> str:
        return _announce("Lights turned off.")

    def set_brightness(self, level: int) -> str:
        return _announce(f"Brightness set to {level}%.")


class SecuritySystem:
    """Controls the alarm; each action returns the message it printed."""

    def activate_alarm(self) -> str:
        return _announce("Alarm activated.")

    def deactivate_alarm(self) -> str:
        return _announce("Alarm deactivated.")

    def monitor_sensors(self) -> str:
        return _announce("Monitoring sensors...")


class HvacSystem:
    """Controls heating and cooling; each action returns the message it printed."""

    def set_temperature(self, temperature: int) -> str:
        return _announce(f"Temperature set to {temperature}°C.")

    def set_mode(self, mode: str) -> str:
        return _announce(f"HVAC mode set to {mode}.")


class SmartHomeFacade:
    """Runs whole scenes across the home's subsystems.

    Each scene returns the messages printed, in order.
    """

    def __init__(
        self,
        lighting: Optional[LightingSystem] = None,
        security: Optional[SecuritySystem] = None,
        hvac: Optional[HvacSystem] = None,
    ) -> None:
        self.lighting = lighting if lighting is not None else LightingSystem()
        self.security = security if security is not None else SecuritySystem()
        self.hvac = hvac if hvac is not None else HvacSystem()

    def activate_morning_routine(self) -> List[str]:
        return [
            self.lighting.turn_on(),
            self.lighting.set_brightness(100),
            self.hvac.set_temperature(22),
            self.hvac.set_mode("Cooling"),
            self.security.deactivate_alarm(),
            _announce("Morning routine activated."),
        ]

    def activate_away_mode(self) -> List[str]:
        return [
            self.lighting.turn_off(),
            self.security.activate_alarm(),
            self.hvac.set_temperature(26),
            self.hvac.set_mode("Eco"),
            _announce("Away mode activated."),
        ]

    def set_movie_night_scene(self) -> List[str]:
        return [
            self.lighting.set_brightness(30),
            self.hvac.set_temperature(21),
            self.security.deactivate_alarm(),
            _announce("Movie night scene set."),
        ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the smart home scenes demonstration."""
    del argv
    smart_home = SmartHomeFacade()

    print(">>> Activating morning routine...")
    smart_home.activate_morning_routine()

    print("\n>>> Activating away mode...")
    smart_home.activate_away_mode()

    print("\n>>> Setting movie night scene...")
    smart_home.set_movie_night_scene()
    return 0


if __name__ == "__main__":
    sys.exit(main())