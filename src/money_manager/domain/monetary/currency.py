from __future__ import annotations


class Currency:
    """Opaque monetary unit identified by its code.

    Currency has no arithmetic of its own; it exists so that two Money values
    can be checked for the same unit. Two currencies are equal if their codes
    are equal.

    Attributes:
        code (str): Currency code (e.g., "USD", "NPR", "BTC").
    """

    __slots__ = ("_code",)

    def __init__(self, code: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code. Surrounding whitespace is stripped and the code is upper-cased.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code is empty.
        """
        # Raise: code must be a string
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        # Raise: code must not be empty
        if not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        self._code = code.upper().strip()

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    def equals(self, other: Currency) -> bool:
        """Check whether $other represents the same monetary unit."""
        return self == other

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}')"
