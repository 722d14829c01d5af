"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class EmailDeliveryError(ProviderError):
    """Email provider rejected the message or could not be reached."""

    pass
