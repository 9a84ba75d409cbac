#  Copyright ©  2025 SRI International.
#  This work is licensed under CC BY-NC-ND 4.0 license.
#  To view a copy of this license, visit https://creativecommons.org/licenses/by-nc-nd/4.0/

class NoSweatError(Exception):
    """Base class for all nosweat-related exceptions."""
    pass

class ConversionError(NoSweatError, ValueError):
    """Raised when the text of a value cannot be converted to the declared type."""
    def __init__(self, value_type, text: str, reason: str = "invalid literal"):
        self.value_type = value_type
        self.text = text
        self.reason = reason
        super().__init__(f"cannot convert {text!r} to {value_type}: {reason}")
