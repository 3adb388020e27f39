"""
Phone Number value object

Company phone as written in company.json, plus the digit string the
messaging deep links expect.
"""

from dataclasses import dataclass

from storefront.infrastructure.utilities.helpers import digits_only


@dataclass(frozen=True)
class PhoneNumber:
    """Phone number value object"""

    value: str

    def __post_init__(self):
        """Validate phone number on creation"""
        if not self.value or not self.digits:
            raise ValueError("Phone number must contain digits")
        object.__setattr__(self, "value", self.value.strip())

    @property
    def digits(self) -> str:
        """E.164-ish digit string: '+90 555 123 45 67' -> '905551234567'"""
        return digits_only(self.value)

    def __str__(self) -> str:
        return self.value
