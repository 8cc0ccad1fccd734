from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

from oauth_properties.config import PROPERTIES_PATH, setup_logging
from oauth_properties.defaults import DEFAULT_PROPERTY_VALUES
from oauth_properties.models.schemas import LoadResult, LoadStatus, OAuthCredentials, SaveResult
from oauth_properties.services.properties_codec import (
    PropertiesFormatError,
    read_properties,
    write_properties,
)


logger = logging.getLogger(__name__)


class PropertiesService:
    """Loads and saves the OAuth settings kept in ``config.properties``.

    I/O problems never reach the caller: reads fall back to the defaults and
    failed writes are logged to stdout. ``load`` and ``try_save`` report which
    of those happened for callers that care.
    """

    def __init__(self, path: Optional[Path] = None, defaults: Mapping[str, str] = DEFAULT_PROPERTY_VALUES):
        self.path = Path(path) if path is not None else PROPERTIES_PATH
        self.defaults = defaults
        setup_logging()

    def get_or_defaults(self) -> Dict[str, str]:
        return self.load().values

    def load(self) -> LoadResult:
        try:
            values = read_properties(self.path)
        except FileNotFoundError:
            if self.create_default_file_if_absent():
                status = LoadStatus.CREATED_DEFAULTS
                reason = f"{self.path} not found, wrote defaults"
            else:
                status = LoadStatus.DEFAULTS_CREATE_FAILED
                reason = f"{self.path} not found and could not be created"
            return LoadResult(values=dict(self.defaults), status=status, reason=reason)
        except (OSError, UnicodeDecodeError, PropertiesFormatError) as exc:
            logger.warning("Could not read %s, using defaults: %s", self.path, exc)
            return LoadResult(
                values=dict(self.defaults),
                status=LoadStatus.DEFAULTS_READ_FAILED,
                reason=str(exc),
            )

        for key, value in self.defaults.items():
            values.setdefault(key, value)
        return LoadResult(values=values, status=LoadStatus.LOADED)

    def save(self, values: Mapping[str, str]) -> None:
        self.try_save(values)

    def try_save(self, values: Mapping[str, str]) -> SaveResult:
        try:
            write_properties(self.path, values)
        except (OSError, ValueError) as exc:
            logger.error("Could not save properties to %s: %s", self.path, exc)
            return SaveResult(saved=False, reason=str(exc))
        return SaveResult(saved=True)

    def create_default_file_if_absent(self) -> bool:
        """Create the file and fill it with the defaults. Returns True only if it was created here."""
        logger.info("Creating default properties file: %s", self.path)
        try:
            with self.path.open("x", encoding="latin-1"):
                pass
        except OSError as exc:
            logger.debug("Default properties file not created: %s", exc)
            return False
        return self.try_save(self.defaults).saved

    def credentials(self) -> OAuthCredentials:
        return OAuthCredentials.from_properties(self.get_or_defaults())
