"""Adapter: let a player built for mp3 play mp4 through an adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class AudioPlayer(Protocol):
    """Anything that can play an mp3."""

    def play_mp3(self) -> str: ...


class MediaPlayer(Protocol):
    """Anything that can play an mp4."""

    def play_mp4(self) -> str: ...


class Apple:
    """An audio player that plays mp3."""

    def play_mp3(self) -> str:
        return "apple: 播放 mp3"


class Sony:
    """A media player that plays mp4."""

    def play_mp4(self) -> str:
        return "sony: 播放 mp4"


@dataclass
class MediaPlayerAdapter:
    """Makes a media player look like an audio player."""

    player: MediaPlayer

    def play_mp3(self) -> str:
        return self.player.play_mp4()


class AdvancedPlayer:
    """Plays whatever audio player it is handed."""

    def play(self, player: AudioPlayer) -> str:
        return player.play_mp3()


def main(argv=None) -> int:
    advanced = AdvancedPlayer()
    print(advanced.play(Apple()))
    print(advanced.play(MediaPlayerAdapter(Sony())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())