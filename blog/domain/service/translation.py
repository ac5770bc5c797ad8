"""Translation catalogue interface."""

from abc import ABC, abstractmethod


class TranslationLoader(ABC):
    """Generic source of translation catalogues."""

    @abstractmethod
    def load(self, locale: str, domain: str) -> dict[str, str]:
        """Load the catalogue for a locale and domain.

        Nested keys are flattened with dots, e.g. ``{"post": {"title": "T"}}``
        becomes ``{"post.title": "T"}``.

        Args:
            locale: Two-letter locale code, e.g. 'en'
            domain: Catalogue name, e.g. 'messages'

        Returns:
            Flattened translations (empty if the catalogue is unavailable)
        """
        pass
