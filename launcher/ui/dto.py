"""Plugin descriptor sent to the launcher UI."""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import Field, model_validator

from launcher.models.wire import WireModel, match_field_keys
from launcher.plugins.image import PluginImage
from launcher.plugins.manifest import MetadataCommand, PlatformSet, PluginMetadata, Runtime
from launcher.plugins.setting import PluginSettingDefinition

_TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}


class InstalledPluginState(WireModel):
    """The part of a descriptor that only exists for installed plugins."""

    setting_definitions: List[PluginSettingDefinition] = Field(default_factory=list)
    setting: Dict[str, str] = Field(default_factory=dict)
    is_disable: bool = False


class PluginDto(WireModel):
    """Snapshot of one plugin as shown by the UI.

    ``setting_definitions``, ``setting`` and ``is_disable`` are only
    meaningful when ``is_installed`` is true. For plugins that are not
    installed they are always reset to their empty values, whatever the
    input said, so two such snapshots compare equal when everything else
    matches. Use :attr:`installed_state` to read them as a single optional
    value.

    Snapshots are immutable; build a new one when plugin state changes.
    ``model_copy(update=...)`` skips validation and must not be used to flip
    ``is_installed``.
    """

    id: str
    name: str
    author: str = ""
    version: str = ""
    min_host_version: str = ""
    runtime: Runtime
    description: str = ""
    icon: PluginImage
    website: str = ""
    entry: str = ""
    screenshot_urls: List[str] = Field(default_factory=list)
    trigger_keywords: List[str] = Field(default_factory=list)
    commands: List[MetadataCommand] = Field(default_factory=list)
    supported_os: PlatformSet = Field(default_factory=frozenset, alias="supportedOS")
    setting_definitions: List[PluginSettingDefinition] = Field(default_factory=list)
    setting: Dict[str, str] = Field(default_factory=dict)
    is_system: bool = False
    is_installed: bool = False
    is_disable: bool = False

    @model_validator(mode="before")
    @classmethod
    def clear_installed_only_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = match_field_keys(cls, data)
        installed = data.get("isInstalled", False)
        if isinstance(installed, str):
            installed = installed.strip().lower() in _TRUE_STRINGS
        if not installed:
            for key in ("settingDefinitions", "setting", "isDisable"):
                data.pop(key, None)
        return data

    @property
    def installed_state(self) -> Optional[InstalledPluginState]:
        if not self.is_installed:
            return None
        return InstalledPluginState(
            setting_definitions=self.setting_definitions,
            setting=self.setting,
            is_disable=self.is_disable,
        )

    @classmethod
    def build(
        cls,
        metadata: PluginMetadata,
        *,
        is_system: bool = False,
        installed: Optional[InstalledPluginState] = None,
        trigger_keywords: Optional[Iterable[str]] = None,
        icon: Optional[PluginImage] = None,
    ) -> "PluginDto":
        """Build a snapshot from manifest metadata and, if installed, its state.

        Args:
            metadata: Static plugin metadata
            is_system: True for built-in plugins
            installed: Installed-only state, None for plugins not installed
            trigger_keywords: User-edited keywords replacing the manifest ones
            icon: Icon to show instead of the manifest one (e.g. resolved path)
        """
        if trigger_keywords is None:
            trigger_keywords = metadata.trigger_keywords
        fields: Dict[str, Any] = {
            "id": metadata.id,
            "name": metadata.name,
            "author": metadata.author,
            "version": metadata.version,
            "min_host_version": metadata.min_host_version,
            "runtime": metadata.runtime,
            "description": metadata.description,
            "icon": icon or metadata.icon,
            "website": metadata.website,
            "entry": metadata.entry,
            "screenshot_urls": list(metadata.screenshot_urls),
            "trigger_keywords": list(trigger_keywords),
            "commands": list(metadata.commands),
            "supported_os": metadata.supported_os,
            "is_system": is_system,
            "is_installed": installed is not None,
        }
        if installed is not None:
            fields["setting_definitions"] = list(installed.setting_definitions)
            fields["setting"] = dict(installed.setting)
            fields["is_disable"] = installed.is_disable
        return cls(**fields)
