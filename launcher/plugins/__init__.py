"""Plugin system for the launcher host.

Imports are lazy so that the record modules (manifest, image, setting) can be
imported from ``launcher.ui`` without pulling in the manager.
"""

__all__ = [
    "PluginMetadata",
    "PluginRuntime",
    "MetadataCommand",
    "PluginImage",
    "ImageType",
    "PluginRegistry",
    "PluginInstance",
    "PluginDiscovery",
    "PluginSettingStore",
    "PluginStore",
    "PluginManager",
]


def __getattr__(name):
    if name in ("PluginMetadata", "PluginRuntime", "MetadataCommand"):
        from launcher.plugins import manifest
        return getattr(manifest, name)
    if name in ("PluginImage", "ImageType"):
        from launcher.plugins import image
        return getattr(image, name)
    if name in ("PluginRegistry", "PluginInstance"):
        from launcher.plugins import registry
        return getattr(registry, name)
    if name == "PluginDiscovery":
        from launcher.plugins.discovery import PluginDiscovery
        return PluginDiscovery
    if name == "PluginSettingStore":
        from launcher.plugins.config import PluginSettingStore
        return PluginSettingStore
    if name == "PluginStore":
        from launcher.plugins.store import PluginStore
        return PluginStore
    if name == "PluginManager":
        from launcher.plugins.manager import PluginManager
        return PluginManager
    raise AttributeError(f"module 'launcher.plugins' has no attribute {name!r}")
