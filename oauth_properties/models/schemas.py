from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from oauth_properties.defaults import KNOWN_KEYS


class LoadStatus(str, Enum):
    LOADED = "loaded"
    CREATED_DEFAULTS = "created_defaults"
    DEFAULTS_CREATE_FAILED = "defaults_create_failed"
    DEFAULTS_READ_FAILED = "defaults_read_failed"


class LoadResult(BaseModel):
    values: Dict[str, str] = Field(default_factory=dict)
    status: LoadStatus
    reason: Optional[str] = Field(None, description="Why defaults were used instead of the file")

    @property
    def degraded(self) -> bool:
        return self.status is not LoadStatus.LOADED


class SaveResult(BaseModel):
    saved: bool
    reason: Optional[str] = None


class OAuthCredentials(BaseModel):
    """Typed, read-only view of the OAuth settings in config.properties."""

    model_config = ConfigDict(frozen=True)

    jira_home: str
    consumer_key: str
    private_key: str
    request_token: Optional[str] = None
    access_token: Optional[str] = None
    secret: Optional[str] = None

    @classmethod
    def from_properties(cls, values: Dict[str, str]) -> "OAuthCredentials":
        return cls(**{key: values[key] for key in KNOWN_KEYS if key in values})
