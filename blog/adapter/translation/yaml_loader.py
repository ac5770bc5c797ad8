"""Translation catalogues stored as YAML files."""

from pathlib import Path
from typing import Any

import yaml

from blog.domain.service.translation import TranslationLoader
from blog.util.logging import get_logger

logger = get_logger(__name__)


def flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dot-separated keys.

    Leaf values are converted to strings.
    """
    result: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            result.update(flatten(value, full_key))
        else:
            result[full_key] = "" if value is None else str(value)
    return result


class YamlTranslationLoader(TranslationLoader):
    """Loads ``<directory>/<domain>.<locale>.yaml`` catalogues."""

    def __init__(self, directory: Path) -> None:
        """Initialize loader.

        Args:
            directory: Directory holding the catalogue files
        """
        self.directory = Path(directory)

    def load(self, locale: str, domain: str) -> dict[str, str]:
        path = self.directory / f"{domain}.{locale}.yaml"
        if not path.is_file():
            logger.debug("No translation catalogue at %s", path)
            return {}

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Unreadable translation catalogue %s: %s", path, e)
            return {}

        if not isinstance(data, dict):
            return {}
        return flatten(data)
