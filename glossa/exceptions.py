"""Custom exception hierarchy for glossa."""


class GlossaError(Exception):
    """Base exception for all glossa errors."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}
        self.original_error = original_error

        full_message = f"[{self.error_code}] {message}"
        if details:
            full_message += f"\nDetails: {details}"
        if original_error:
            full_message += f"\nCaused by: {original_error}"

        super().__init__(full_message)

    def to_dict(self):
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigError(GlossaError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "CFG_ERR", details, original_error)


class UnknownLanguageError(GlossaError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "LANG_ERR", details, original_error)


class ProfileError(GlossaError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "PROFILE_ERR", details, original_error)


class ContractError(GlossaError):
    """Raised when a caller breaks an invariant of the scoring contract."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "CONTRACT_ERR", details, original_error)


class OutcomeError(ContractError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "OUTCOME_ERR", details, original_error)


class UnsupportedLanguageError(ContractError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "ALPHABET_ERR", details, original_error)
