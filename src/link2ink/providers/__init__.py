"""AI Providers - Gemini text analysis and image synthesis."""

from .text import TextProvider, TextResult, InlineDocument
from .image import ImageProvider
from .config import ProviderConfig, CredentialSettings, load_provider_config

__all__ = [
    "TextProvider",
    "TextResult",
    "InlineDocument",
    "ImageProvider",
    "ProviderConfig",
    "CredentialSettings",
    "load_provider_config",
]
