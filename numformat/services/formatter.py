"""
Phone number formatting service.
Derives the fixed set of display formats for a US phone number.
"""

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from ..models import FormatSet, FormatVariant
from ..utils.patterns import group_dotted, strip_non_digits

# All input is parsed as if dialled from the US.
DEFAULT_REGION = "US"


class PhoneFormatter:
    """
    Format a raw phone number into every supported rendering.
    Invalid input maps to an empty FormatSet, never to an exception.
    """

    @staticmethod
    def format(raw: str) -> FormatSet:
        """
        Format a raw phone number string.

        Args:
            raw: Whatever the user typed (may be empty or malformed)

        Returns:
            FormatSet with international, national, E.164 and dotted
            renderings, or an empty FormatSet if the number is not valid
        """
        if not raw:
            return FormatSet.empty()

        try:
            parsed = phonenumbers.parse(raw, DEFAULT_REGION)
        except NumberParseException:
            return FormatSet.empty()

        if not phonenumbers.is_valid_number(parsed):
            return FormatSet.empty()

        national = phonenumbers.format_number(parsed, PhoneNumberFormat.NATIONAL)

        return FormatSet.from_values({
            FormatVariant.INTERNATIONAL: phonenumbers.format_number(
                parsed, PhoneNumberFormat.INTERNATIONAL
            ),
            FormatVariant.NATIONAL: national,
            FormatVariant.E164: phonenumbers.format_number(parsed, PhoneNumberFormat.E164),
            FormatVariant.INTERNATIONAL_WITH_DOTS: PhoneFormatter.format_dotted(national),
        })

    @staticmethod
    def format_dotted(national: str) -> str:
        """
        Regroup the digits of a national rendering as DDD.DDD.DDDD.
        Digit counts other than ten (extensions) come back ungrouped.
        """
        return group_dotted(strip_non_digits(national))


def format_number(raw: str) -> FormatSet:
    """Module-level shortcut for PhoneFormatter.format."""
    return PhoneFormatter.format(raw)
