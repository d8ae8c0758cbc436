import re

from django.core.exceptions import ValidationError

GSTIN_LENGTH = 15
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


def normalize_gstin(value):
    return re.sub(r"\s", "", value or "").upper()


def validate_gstin(value):
    """
    Validate an Indian GST number. Empty values pass (the field is optional).
    Checks, in order:
      1) length after stripping spaces
      2) the 2-digit / PAN / entity / Z / checksum layout
      3) state code between 01 and 37
    """
    gstin = normalize_gstin(value)
    if not gstin:
        return

    if len(gstin) != GSTIN_LENGTH:
        raise ValidationError("GST number must be 15 characters long")

    if not GSTIN_PATTERN.match(gstin):
        raise ValidationError("Invalid GST number format")

    state_code = int(gstin[:2])
    if state_code < 1 or state_code > 37:
        raise ValidationError("Invalid state code in GST number")


def format_gstin(value):
    """Group a GST number for display: `27 ABCDE 1234 F 1 Z 5`."""
    gstin = normalize_gstin(value)
    if len(gstin) != GSTIN_LENGTH:
        return gstin
    parts = (gstin[0:2], gstin[2:7], gstin[7:11], gstin[11], gstin[12], gstin[13], gstin[14])
    return " ".join(parts)
