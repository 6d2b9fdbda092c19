"""
IDNR (Thai National Identity Card Number).

The Thai identity card is an official identity document issued to Thai
nationals. Its number has 13 digits; the last one is a mod-11 check digit
over the first twelve.

More information:
    https://en.wikipedia.org/wiki/Thai_identity_card

>>> validate("1-1017-00230-70-8").is_valid
True
>>> validate("1101700230709").error_kind.value
'InvalidChecksum'
>>> format("1101700230708")
'1-1017-00230-70-8'
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidChecksum, InvalidFormat, InvalidLength, ValidationError
from ..types import ValidateResult
from ..util import strings
from ..util.checksum import weighted_sum

logger = logging.getLogger(__name__)

NAME = "Thai National Identity Card Number"
LOCAL_NAME = "บัตรประจำตัวประชาชนไทย"
ABBREVIATION = "IDNR"

LENGTH = 13
WEIGHTS = (13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
MODULUS = 11

# Offsets where the grouped display form gets a separator: 1-2345-67890-12-3
FORMAT_OFFSETS = (1, 5, 10, 12)

_SEPARATORS = " -"


def compact(number: str) -> str:
    """
    Return the number without spaces or hyphens.

    No length, digit or checksum checks are done here.

    Raises:
        InvalidFormat: the input holds control or format characters.
    """
    return strings.clean_unicode(number, _SEPARATORS)


def calc_check_digit(front: str) -> str:
    """
    Expected check digit for the 12-digit payload ``front``.

    ``(11 - sum) % 11`` can be 10, which renders as ``"10"`` and therefore
    never matches a single trailing digit.
    """
    total = weighted_sum(front, WEIGHTS, MODULUS)
    return str((MODULUS - total) % MODULUS)


def validate(number: str) -> ValidateResult:
    """
    Run the full check on ``number`` and report the outcome.

    Stages run in order and the first failure wins: unsafe characters
    (InvalidFormat), length (InvalidLength), ASCII digits (InvalidFormat),
    check digit (InvalidChecksum). Never raises.
    """
    try:
        value = compact(number)
        if len(value) != LENGTH:
            raise InvalidLength()
        if not strings.isdigits(value):
            raise InvalidFormat()
        front, check = strings.split_at(value, LENGTH - 1)
        if calc_check_digit(front) != check:
            raise InvalidChecksum()
    except ValidationError as e:
        logger.debug("idnr: rejected input (length=%d, reason=%s)", len(number), e.kind.value)
        return ValidateResult.invalid(e)

    return ValidateResult.valid(value, is_individual=True, is_company=False)


def is_valid(number: str) -> bool:
    """True if ``number`` passes :func:`validate`."""
    return validate(number).is_valid


def format(number: str, strict: bool = False, separator: str = "-") -> str:
    """
    Render the number in its grouped display form, e.g. ``1-1017-00230-70-8``.

    The value is not validated; short input yields empty trailing groups. When
    the input holds unsafe characters they are dropped and a warning is
    logged, unless ``strict`` is set, in which case InvalidFormat propagates.
    """
    try:
        value = compact(number)
    except InvalidFormat:
        if strict:
            raise
        logger.warning("idnr: dropping unsafe characters before formatting (length=%d)", len(number))
        value = strings.drop_unsafe(number, _SEPARATORS)

    return separator.join(strings.split_at(value, *FORMAT_OFFSETS))
