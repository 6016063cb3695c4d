"""Custom exception hierarchy for the ssml_builder package."""


class SSMLBuilderError(Exception):
    """Base exception for all ssml_builder errors."""


class BuilderUsageError(SSMLBuilderError):
    """Raised when a builder is used outside the context it requires.

    The only case today is calling ``build()`` or ``voice()`` on a
    :class:`~ssml_builder.builders.VoiceBuilder` that was constructed
    directly instead of through :meth:`SSMLBuilder.voice`.
    """
