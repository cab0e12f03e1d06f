"""A music player whose buttons behave according to its current state."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


class PlayerState:
    """A player state; buttons it does not handle are ignored."""

    def press_play(self, player: "MusicPlayer") -> None:
        """Ignore the play button."""

    def press_pause(self, player: "MusicPlayer") -> None:
        """Ignore the pause button."""

    def press_stop(self, player: "MusicPlayer") -> None:
        """Ignore the stop button."""


class StoppedState(PlayerState):
    """Nothing is playing."""

    def press_play(self, player: "MusicPlayer") -> None:
        print("Starting music...")
        player.change_state(PlayingState())

    def press_pause(self, player: "MusicPlayer") -> None:
        print("Cannot pause. Music is already stopped.")

    def press_stop(self, player: "MusicPlayer") -> None:
        print("Music is already stopped.")


class PlayingState(PlayerState):
    """Music is playing."""

    def press_play(self, player: "MusicPlayer") -> None:
        print("Music is already playing.")

    def press_pause(self, player: "MusicPlayer") -> None:
        print("Pausing music...")
        player.change_state(PausedState())

    def press_stop(self, player: "MusicPlayer") -> None:
        print("Stopping music...")
        player.change_state(StoppedState())


class PausedState(PlayerState):
    """Playback is paused."""

    def press_play(self, player: "MusicPlayer") -> None:
        print("Resuming music...")
        player.change_state(PlayingState())

    def press_pause(self, player: "MusicPlayer") -> None:
        print("Music is already paused.")

    def press_stop(self, player: "MusicPlayer") -> None:
        print("Stopping music from paused state...")
        player.change_state(StoppedState())


class MusicPlayer:
    """Forwards button clicks to its current state."""

    def __init__(self, initial_state: Optional[PlayerState] = None) -> None:
        self.state: PlayerState = initial_state if initial_state is not None else StoppedState()

    def change_state(self, new_state: PlayerState) -> None:
        self.state = new_state

    def click_play(self) -> None:
        self.state.press_play(self)

    def click_pause(self) -> None:
        self.state.press_pause(self)

    def click_stop(self) -> None:
        self.state.press_stop(self)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the music player demonstration."""
    del argv
    player = MusicPlayer(StoppedState())
    player.click_stop()
    player.click_play()
    player.click_pause()
    player.click_play()
    player.click_stop()
    player.click_pause()
    player.click_stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())