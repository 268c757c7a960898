"""
Contract types understood by the valuation dispatcher.

The set of instruments is closed; anything else maps to UNKNOWN and is
valued at zero rather than raising.
"""

from enum import Enum


class ContractType(Enum):
    """Contract type enumeration; values are the display labels."""

    EUROPEAN_CALL = "European Call"
    EUROPEAN_PUT = "European Put"
    AMERICAN_CALL = "American Call"
    AMERICAN_PUT = "American Put"
    ASIAN_CALL = "Asian Call"  # Arithmetic average
    ASIAN_PUT = "Asian Put"  # Arithmetic average
    ASIAN_GEO_CALL = "Asian Geo Call"
    ASIAN_GEO_PUT = "Asian Geo Put"
    FUTURES_LONG = "Futures Long"
    FUTURES_SHORT = "Futures Short"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str) -> "ContractType":
        """
        Map a display label to a contract type.

        Matching ignores case and surrounding whitespace. Unrecognised
        labels return UNKNOWN.

        Examples
        --------
        >>> ContractType.from_label("asian geo put")
        <ContractType.ASIAN_GEO_PUT: 'Asian Geo Put'>
        """
        normalized = " ".join(label.split()).lower()
        for member in cls:
            if member.value.lower() == normalized and member is not cls.UNKNOWN:
                return member
        return cls.UNKNOWN

    @property
    def is_european(self) -> bool:
        return self in (ContractType.EUROPEAN_CALL, ContractType.EUROPEAN_PUT)


def available_labels() -> list[str]:
    """Labels of all valuable contract types, e.g. for a selection list."""
    return [member.value for member in ContractType if member is not ContractType.UNKNOWN]
