"""Translation catalogue adapter."""

from .yaml_loader import YamlTranslationLoader, flatten

__all__ = ["YamlTranslationLoader", "flatten"]
