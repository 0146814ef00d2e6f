"""
Message catalog for the console front end.
Loads the YAML text file once and hands out read-only lookups.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import yaml

from .config import ConsoleConfig


class MessageCatalog:
    """
    Read-only lookup of user-facing text.

    Usage:
        messages = MessageCatalog.load()
        messages["goodbye"]
        messages.format("win", winner="Optimus Prime")
    """

    def __init__(self, messages: Mapping[str, str]):
        self._messages = MappingProxyType(dict(messages))

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "MessageCatalog":
        """
        Load messages from a YAML file.

        Args:
            path: YAML file. Uses ConsoleConfig.MESSAGES_PATH if not provided.

        Returns:
            The catalog.

        Raises:
            ValueError: If the file isn't a mapping of keys to text.
        """
        path = Path(path or ConsoleConfig.MESSAGES_PATH)
        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping of message keys")

        return cls({str(key): str(value) for key, value in data.items()})

    def __getitem__(self, key: str) -> str:
        return self._messages[key]

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def format(self, key: str, **values) -> str:
        """Look up a message and fill in its placeholders."""
        return self._messages[key].format(**values)

    def keys(self):
        return self._messages.keys()
