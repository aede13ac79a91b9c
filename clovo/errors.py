"""
clovo.errors
Generator error taxonomy. Each failure is a GeneratorError subclass
carrying a GeneratorStatus with a fixed description string.
"""

from enum import Enum


class GeneratorStatus(Enum):
    SUCCESS = 0
    NULL_INPUT = -1
    INVALID_LENGTH = -2
    NO_CHARSET = -3
    BUFFER_TOO_SMALL = -4
    RANDOM_FAILED = -5
    COMMON_PASSWORD = -6
    FILE_ACCESS = -7

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    GeneratorStatus.SUCCESS: "Success",
    GeneratorStatus.NULL_INPUT: "Required input was not provided",
    GeneratorStatus.INVALID_LENGTH: "Invalid password length",
    GeneratorStatus.NO_CHARSET: "No character sets selected",
    GeneratorStatus.BUFFER_TOO_SMALL: "Output buffer too small",
    GeneratorStatus.RANDOM_FAILED: "Failed to generate random data",
    GeneratorStatus.COMMON_PASSWORD: "Generated password is too common (max retries exceeded)",
    GeneratorStatus.FILE_ACCESS: "Failed to read common password file",
}


def generator_error_string(status: GeneratorStatus) -> str:
    return GeneratorStatus(status).description


class GeneratorError(Exception):
    status = GeneratorStatus.SUCCESS

    def __init__(self, message: str = ""):
        super().__init__(message or self.status.description)


class NullInputError(GeneratorError, ValueError):
    status = GeneratorStatus.NULL_INPUT


class InvalidLengthError(GeneratorError, ValueError):
    status = GeneratorStatus.INVALID_LENGTH


class NoCharsetError(GeneratorError, ValueError):
    status = GeneratorStatus.NO_CHARSET


class BufferTooSmallError(GeneratorError, ValueError):
    status = GeneratorStatus.BUFFER_TOO_SMALL


class RandomFailedError(GeneratorError):
    status = GeneratorStatus.RANDOM_FAILED


class CommonPasswordError(GeneratorError):
    status = GeneratorStatus.COMMON_PASSWORD


class FileAccessError(GeneratorError):
    status = GeneratorStatus.FILE_ACCESS
