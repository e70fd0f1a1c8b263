"""Setting definitions a plugin declares for its settings page.

Definitions are carried as-is to the UI; no validation of the values a user
enters happens here.
"""

from typing import Annotated, Dict, List, Literal, Sequence, Union

from pydantic import Field

from launcher.models.wire import WireModel


class SelectOption(WireModel):
    label: str
    value: str


class HeadSetting(WireModel):
    """Section heading."""

    type: Literal["head"] = "head"
    content: str = ""


class LabelSetting(WireModel):
    """Free text shown between inputs."""

    type: Literal["label"] = "label"
    content: str = ""
    tooltip: str = ""


class NewLineSetting(WireModel):
    """Forces the next definition onto a new row."""

    type: Literal["newline"] = "newline"


class TextboxSetting(WireModel):
    type: Literal["textbox"] = "textbox"
    key: str
    label: str = ""
    suffix: str = ""
    default_value: str = ""
    tooltip: str = ""
    max_lines: int = Field(default=1, ge=1)


class CheckboxSetting(WireModel):
    type: Literal["checkbox"] = "checkbox"
    key: str
    label: str = ""
    default_value: bool = False
    tooltip: str = ""


class SelectSetting(WireModel):
    type: Literal["select"] = "select"
    key: str
    label: str = ""
    default_value: str = ""
    options: List[SelectOption] = Field(default_factory=list)
    tooltip: str = ""


PluginSettingDefinition = Annotated[
    Union[HeadSetting, LabelSetting, NewLineSetting, TextboxSetting, CheckboxSetting, SelectSetting],
    Field(discriminator="type"),
]


def default_settings(definitions: Sequence[PluginSettingDefinition]) -> Dict[str, str]:
    """Collect the default value of every keyed definition.

    Values are strings, matching how settings are persisted; checkboxes
    become ``"true"`` / ``"false"``.
    """
    values: Dict[str, str] = {}
    for definition in definitions:
        if isinstance(definition, CheckboxSetting):
            values[definition.key] = "true" if definition.default_value else "false"
        elif isinstance(definition, (TextboxSetting, SelectSetting)):
            values[definition.key] = definition.default_value
    return values
