"""Serial number test data, one generator per validation equivalence class.

The system under test accepts serial numbers of 2 to 256 characters that
contain at least one alphanumeric character. Each SerialNumberKind produces a
value on a known side of those limits so UI and API scenarios agree on what
"too short", "too long" and "invalid" mean.
"""
import string
from enum import Enum

from faker import Faker

SERIAL_NUMBER_PREFIX = "SN-"
MIN_SERIAL_NUMBER_LENGTH = 2
MAX_SERIAL_NUMBER_LENGTH = 256

ALPHANUMERIC_CHARACTERS = string.ascii_uppercase + string.digits
SYMBOL_CHARACTERS = string.punctuation

_fake = Faker()


class SerialNumberKind(str, Enum):
    """Equivalence classes of serial number input."""

    VALID = "valid"
    EMPTY = "empty"
    TOO_SHORT = "short"
    TOO_LONG = "long"
    SYMBOLS_ONLY = "symbols"
    MAX_LENGTH = "max"


def _random_chars(length: int, chars: str) -> str:
    return _fake.lexify("?" * length, letters=chars)


def generate_serial_number(kind: SerialNumberKind | str = SerialNumberKind.VALID) -> str:
    """Return a serial number representative of the given equivalence class.

    kind may be a SerialNumberKind or its tag ("valid", "empty", "short",
    "long", "symbols", "max"). An unknown tag raises ValueError instead of
    quietly producing valid data.

    - VALID: "SN-" followed by 8 uppercase alphanumeric characters.
    - EMPTY: "".
    - TOO_SHORT: 1 uppercase alphanumeric character.
    - TOO_LONG: 258 uppercase alphanumeric characters.
    - SYMBOLS_ONLY: 8 punctuation characters.
    - MAX_LENGTH: 256 uppercase alphanumeric characters (longest accepted value).
    """
    kind = SerialNumberKind(kind)
    if kind is SerialNumberKind.EMPTY:
        return ""
    if kind is SerialNumberKind.TOO_SHORT:
        return _random_chars(MIN_SERIAL_NUMBER_LENGTH - 1, ALPHANUMERIC_CHARACTERS)
    if kind is SerialNumberKind.TOO_LONG:
        return _random_chars(MAX_SERIAL_NUMBER_LENGTH + 2, ALPHANUMERIC_CHARACTERS)
    if kind is SerialNumberKind.MAX_LENGTH:
        return _random_chars(MAX_SERIAL_NUMBER_LENGTH, ALPHANUMERIC_CHARACTERS)
    if kind is SerialNumberKind.SYMBOLS_ONLY:
        return _random_chars(8, SYMBOL_CHARACTERS)
    return SERIAL_NUMBER_PREFIX + _random_chars(8, ALPHANUMERIC_CHARACTERS)


def is_valid_serial_number(value: str) -> bool:
    """Server-side serial number rule: 2..256 chars with at least one alphanumeric.

    ChargePointCreate validates through this, so generated classes and the
    reference service agree.
    """
    if not MIN_SERIAL_NUMBER_LENGTH <= len(value) <= MAX_SERIAL_NUMBER_LENGTH:
        return False
    return any(c.isalnum() for c in value)
