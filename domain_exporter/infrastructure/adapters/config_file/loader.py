"""YAML file adapter for the domain list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ....application.exceptions import ConfigParseError, ConfigReadError
from ....domain.entities import DomainConfig, DomainEntry

logger = logging.getLogger(__name__)


class DomainItem(BaseModel):
    """One element of the `domains` list."""

    model_config = ConfigDict(extra="ignore")

    domain: str = Field(min_length=1)
    expires: str


class DomainListDocument(BaseModel):
    """Top-level layout of the config file."""

    model_config = ConfigDict(extra="ignore")

    domains: list[DomainItem] = Field(default_factory=list)


class YamlDomainConfigLoader:
    """
    Loads the domain list from a YAML file.

    Expected layout::

        domains:
          - domain: example.com
            expires: "2026-01-31"

    Scalars are read as plain strings, so unquoted dates are kept exactly
    as written.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize loader with the config file path."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Path of the config file."""
        return self._path

    def load(self) -> DomainConfig:
        """
        Read, parse and validate the config file.

        Returns:
            DomainConfig with every expiration date resolved.

        Raises:
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the file is not a well-formed domain list.
            DateFormatError: If an expiration date is malformed.
        """
        text = self._read()
        document = self._parse(text)

        config = DomainConfig(
            domains=tuple(
                DomainEntry.create(name=item.domain, expires=item.expires)
                for item in document.domains
            )
        )
        logger.info("Loaded %d domains from %s", len(config), self._path)
        logger.debug("Domains: %s", ", ".join(config.names))
        return config

    def _read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"failed to read config file {self._path}: {e}"
            raise ConfigReadError(msg) from e

    def _parse(self, text: str) -> DomainListDocument:
        try:
            raw: Any = yaml.load(text, Loader=yaml.BaseLoader)  # noqa: S506
        except yaml.YAMLError as e:
            msg = f"failed to parse config file {self._path}: {e}"
            raise ConfigParseError(msg) from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            msg = f"failed to parse config file {self._path}: top level must be a mapping"
            raise ConfigParseError(msg)

        # A bare `domains:` line is a null list
        if raw.get("domains") == "":
            raw = {**raw, "domains": []}

        try:
            return DomainListDocument.model_validate(raw)
        except ValidationError as e:
            msg = f"failed to parse config file {self._path}: {e}"
            raise ConfigParseError(msg) from e
