"""Step-by-step construction of a UART configuration."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Optional, Sequence

MIN_BAUD_RATE = 1200
MAX_BAUD_RATE = 115200


@dataclass(frozen=True)
class UartConfig:
    """Serial line settings. Parity: 0 none, 1 odd, 2 even."""

    baud_rate: int = 9600
    parity: int = 0
    stop_bits: int = 1
    data_bits: int = 8


class UartBuilder:
    """Validates and collects UART settings; every setter returns the builder."""

    def __init__(self) -> None:
        self._config = UartConfig()

    def set_baud_rate(self, baud_rate: int) -> "UartBuilder":
        if not MIN_BAUD_RATE <= baud_rate <= MAX_BAUD_RATE:
            raise ValueError("Invalid baud rate. Must be between 1200 and 115200.")
        self._config = replace(self._config, baud_rate=baud_rate)
        return self

    def set_parity(self, parity: int) -> "UartBuilder":
        if parity not in (0, 1, 2):
            raise ValueError("Invalid parity. Must be 0 (None), 1 (Odd), or 2 (Even).")
        self._config = replace(self._config, parity=parity)
        return self

    def set_stop_bits(self, stop_bits: int) -> "UartBuilder":
        if stop_bits not in (1, 2):
            raise ValueError("Invalid stop bits. Must be 1 or 2.")
        self._config = replace(self._config, stop_bits=stop_bits)
        return self

    def set_data_bits(self, data_bits: int) -> "UartBuilder":
        if data_bits not in (8, 9):
            raise ValueError("Invalid data bits. Must be 8 or 9.")
        self._config = replace(self._config, data_bits=data_bits)
        return self

    def build(self) -> UartConfig:
        """Return the configuration collected so far."""
        return self._config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the UART builder demonstration."""
    del argv
    config = (
        UartBuilder()
        .set_baud_rate(115200)
        .set_parity(1)
        .set_stop_bits(2)
        .set_data_bits(9)
        .build()
    )
    print("UART Configuration:")
    print(f"Baud Rate: {config.baud_rate}")
    print(f"Parity: {config.parity}")
    print(f"Stop Bits: {config.stop_bits}")
    print(f"Data Bits: {config.data_bits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())