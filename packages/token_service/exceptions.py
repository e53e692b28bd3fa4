"""
Exceptions raised by the propagating token service paths.
"""


class TokenServiceError(Exception):
    """Base class for token service errors."""
    pass


class ProviderUnavailableError(TokenServiceError):
    """No chain provider has been configured."""

    def __init__(self, message: str = "Provider not available"):
        super().__init__(message)


class InvalidAddressError(TokenServiceError, ValueError):
    """Address is not a well-formed chain address."""

    def __init__(self, address: str, kind: str = "token"):
        super().__init__(f"Invalid {kind} address: {address}")
        self.address = address


class ContractNotFoundError(TokenServiceError):
    """No bytecode deployed at the address."""

    def __init__(self, address: str):
        super().__init__(f"No contract found at address: {address}")
        self.address = address


class SignerUnavailableError(TokenServiceError):
    """Provider has no account to sign transactions with."""
    pass


class InvalidAmountError(TokenServiceError, ValueError):
    """Amount string cannot be converted to token units."""
    pass
