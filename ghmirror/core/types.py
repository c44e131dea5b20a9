"""Small types and Enums used by ghmirror."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FetchCause(str, Enum):
    """Why listing the account's repositories failed."""

    transport = "transport"
    http_status = "http-status"
    decode = "decode"


class SyncPhase(str, Enum):
    """Step of a reconciliation that failed."""

    clone = "clone"
    fetch = "fetch"
    describe = "describe"


class SyncAction(str, Enum):
    initialize = "initialize"
    update = "update"


class RepositoryDescriptor(BaseModel):
    """One remote repository as reported by the API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    remote_url: str = Field(alias="html_url")
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v
