"""Plugin manifest model - describes a plugin's metadata as declared in plugin.json."""

from enum import Enum
from typing import Annotated, Any, FrozenSet, Iterable, List

from pydantic import BeforeValidator, Field, PlainSerializer, field_validator

from launcher.models.wire import WireModel
from launcher.plugins.image import DEFAULT_PLUGIN_ICON, PluginImage
from launcher.plugins.setting import PluginSettingDefinition

ALL_PLATFORMS = frozenset({"windows", "linux", "darwin"})


class PluginRuntime(str, Enum):
    """Runtime a plugin needs in order to run.

    Values outside the known set map to ``UNKNOWN`` instead of failing, so a
    UI built against an older host still renders newer descriptors.
    """

    DOTNET = "DOTNET"
    NODEJS = "NODEJS"
    PYTHON = "PYTHON"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().upper():
                    return member
        return cls.UNKNOWN

    @classmethod
    def parse(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls(value)
        return value


def _normalize_platforms(value: Any) -> Any:
    if isinstance(value, str):
        value = [value]
    if isinstance(value, Iterable):
        return frozenset(str(item).strip().lower() for item in value)
    return value


def _sorted_platforms(value: FrozenSet[str]) -> List[str]:
    return sorted(value)


Runtime = Annotated[PluginRuntime, BeforeValidator(PluginRuntime.parse)]

PlatformSet = Annotated[
    FrozenSet[str],
    BeforeValidator(_normalize_platforms),
    PlainSerializer(_sorted_platforms, return_type=List[str]),
]


class MetadataCommand(WireModel):
    """A command declared by a plugin."""

    command: str
    description: str = ""


class PluginMetadata(WireModel):
    """Plugin manifest loaded from plugin.json or from the store catalog.

    Keys are matched case-insensitively, so ``"Id"``, ``"ID"`` and ``"id"``
    are the same field.
    """

    id: str = Field(..., min_length=1, description="Unique plugin identifier")
    name: str = Field(..., description="Human-readable plugin name")
    author: str = ""
    version: str = "1.0.0"
    min_host_version: str = ""
    runtime: Runtime
    description: str = ""
    icon: PluginImage = DEFAULT_PLUGIN_ICON
    website: str = ""
    entry: str = Field(default="", description="Entry file relative to the plugin directory")
    screenshot_urls: List[str] = Field(default_factory=list)
    trigger_keywords: List[str]
    commands: List[MetadataCommand] = Field(default_factory=list)
    supported_os: PlatformSet = Field(default=ALL_PLATFORMS, alias="supportedOS")
    setting_definitions: List[PluginSettingDefinition] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def id_is_directory_name(cls, v: str) -> str:
        if v in (".", "..") or "/" in v or "\\" in v:
            raise ValueError("plugin id must be usable as a directory name")
        return v

    @field_validator("runtime")
    @classmethod
    def runtime_is_known(cls, v: PluginRuntime) -> PluginRuntime:
        if v == PluginRuntime.UNKNOWN:
            raise ValueError("unsupported runtime")
        return v

    @field_validator("trigger_keywords")
    @classmethod
    def trigger_keywords_not_empty(cls, v: List[str]) -> List[str]:
        keywords = [k.strip() for k in v if k and k.strip()]
        if not keywords:
            raise ValueError("plugin must register at least one trigger keyword")
        return keywords

    def supports(self, platform: str) -> bool:
        """Check whether the plugin declares support for ``platform``."""
        return platform.lower() in self.supported_os
