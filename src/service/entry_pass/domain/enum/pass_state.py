from enum import StrEnum


class PassState(StrEnum):
    VALID = 'valid'
    EXPIRED = 'expired'
    NONE = 'none'
