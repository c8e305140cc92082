"""Exceptions raised by the LLM services."""


class ModelConfigurationError(ValueError):
    """A model was requested whose provider has no configured credential."""


class ModelResponseError(RuntimeError):
    """A provider call failed; the message is safe to show to clients."""


class ProviderAuthenticationError(RuntimeError):
    """A provider rejected the configured credential."""
