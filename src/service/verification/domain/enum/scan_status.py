from enum import StrEnum


class ScanStatus(StrEnum):
    IDLE = 'idle'
    SCANNING = 'scanning'
    SUCCESS = 'success'
    ERROR = 'error'


class ScanCue(StrEnum):
    """Audio cue played by the scanner UI; presentation only."""

    SUCCESS = 'success'
    ALERT = 'alert'

    @property
    def sound_path(self) -> str:
        return '/sounds/yay.mp3' if self is ScanCue.SUCCESS else '/sounds/alert.mp3'
