from typing import Optional


class LastTimeIError(Exception):
    """Base class for every failure reported to the caller."""


class UnregisteredDeviceError(LastTimeIError):
    def __init__(self, serial_number: str):
        self.serial_number = serial_number
        super().__init__(f"serial number, {serial_number}, not registered!")


class StoreWriteError(LastTimeIError):
    """The store rejected or failed the insert. `message` is the store's own text."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class StoreReadError(LastTimeIError):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
