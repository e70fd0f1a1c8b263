"""Request models for API endpoints."""

from typing import Dict

from pydantic import BaseModel, Field, field_validator


def _keyword_not_empty(v: str) -> str:
    if not v or not v.strip():
        raise ValueError('keyword cannot be empty')
    return v.strip()


class PluginSettingsUpdate(BaseModel):
    """Request body for updating plugin setting values (merged into saved ones)."""

    settings: Dict[str, str] = Field(..., description="Setting key to new value")


class TriggerKeywordAdd(BaseModel):
    """Request body for adding a trigger keyword."""

    keyword: str

    @field_validator('keyword')
    @classmethod
    def keyword_not_empty(cls, v: str) -> str:
        return _keyword_not_empty(v)


class TriggerKeywordUpdate(BaseModel):
    """Request body for replacing a trigger keyword."""

    old: str
    new: str

    @field_validator('new')
    @classmethod
    def new_not_empty(cls, v: str) -> str:
        return _keyword_not_empty(v)


class InstallRequest(BaseModel):
    """Request body for installing a plugin directory or theme file from a local path."""

    path: str = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "examples": [
                {"path": "/home/me/dev/my-plugin"},
                {"path": "/home/me/themes/solarized.json"},
            ]
        }
