"""Built-in system plugins.

System plugins ship with the host, are always installed and cannot be
uninstalled. Only their metadata lives here.
"""

from typing import List

from launcher.plugins.image import ImageType, PluginImage
from launcher.plugins.manifest import MetadataCommand, PluginMetadata, PluginRuntime
from launcher.plugins.setting import CheckboxSetting, HeadSetting, SelectSetting, SelectOption, TextboxSetting

SYSTEM_AUTHOR = "Launcher"

SYSTEM_PLUGINS: List[PluginMetadata] = [
    PluginMetadata(
        id="system.plugin-manager",
        name="Plugin Manager",
        author=SYSTEM_AUTHOR,
        runtime=PluginRuntime.PYTHON,
        description="Install, uninstall and configure plugins",
        icon=PluginImage(image_type=ImageType.EMOJI, image_data="🧩"),
        trigger_keywords=["wpm"],
        commands=[
            MetadataCommand(command="install", description="Install a plugin"),
            MetadataCommand(command="uninstall", description="Uninstall a plugin"),
        ],
    ),
    PluginMetadata(
        id="system.theme",
        name="Theme Manager",
        author=SYSTEM_AUTHOR,
        runtime=PluginRuntime.PYTHON,
        description="Switch between installed themes",
        icon=PluginImage(image_type=ImageType.EMOJI, image_data="🎨"),
        trigger_keywords=["theme"],
    ),
    PluginMetadata(
        id="system.calculator",
        name="Calculator",
        author=SYSTEM_AUTHOR,
        runtime=PluginRuntime.PYTHON,
        description="Evaluate arithmetic expressions",
        icon=PluginImage(image_type=ImageType.EMOJI, image_data="🧮"),
        trigger_keywords=["*"],
        setting_definitions=[
            HeadSetting(content="Calculator"),
            SelectSetting(
                key="separator",
                label="Thousands separator",
                default_value="none",
                options=[
                    SelectOption(label="None", value="none"),
                    SelectOption(label="Comma", value="comma"),
                    SelectOption(label="Space", value="space"),
                ],
            ),
            TextboxSetting(key="precision", label="Decimal places", default_value="10"),
            CheckboxSetting(key="copy_on_enter", label="Copy result on enter", default_value=True),
        ],
    ),
]
