"""Tests for the PluginDto record."""

import pytest
from pydantic import ValidationError

from launcher.plugins.image import ImageType, PluginImage
from launcher.plugins.manifest import MetadataCommand, PluginMetadata, PluginRuntime
from launcher.plugins.setting import CheckboxSetting, SelectOption, SelectSetting, TextboxSetting
from launcher.ui.dto import InstalledPluginState, PluginDto


def _metadata(**overrides) -> PluginMetadata:
    fields = dict(
        id="calc",
        name="Calculator",
        author="tester",
        version="2.1.0",
        min_host_version="0.1.0",
        runtime="PYTHON",
        description="Evaluate expressions",
        icon="emoji:🧮",
        website="https://example.com/calc",
        entry="main.py",
        screenshot_urls=["https://example.com/2.png", "https://example.com/1.png"],
        trigger_keywords=["=", "calc"],
        commands=[
            MetadataCommand(command="round", description="Round result"),
            MetadataCommand(command="hex", description="Show hex"),
        ],
        supported_os=["windows", "linux"],
        setting_definitions=[
            TextboxSetting(key="precision", default_value="10"),
            CheckboxSetting(key="copy", default_value=True),
        ],
    )
    fields.update(overrides)
    return PluginMetadata(**fields)


def _installed_state(**overrides) -> InstalledPluginState:
    fields = dict(
        setting_definitions=[
            SelectSetting(
                key="mode",
                default_value="b",
                options=[SelectOption(label="B", value="b"), SelectOption(label="A", value="a")],
            )
        ],
        setting={"mode": "a", "precision": "4"},
        is_disable=True,
    )
    fields.update(overrides)
    return InstalledPluginState(**fields)


class TestNotInstalled:
    """Installed-only fields of plugins that are not installed."""

    def test_build_leaves_installed_only_fields_empty(self):
        dto = PluginDto.build(_metadata())

        assert dto.is_installed is False
        assert dto.setting_definitions == []
        assert dto.setting == {}
        assert dto.is_disable is False
        assert dto.installed_state is None

    def test_construction_drops_installed_only_input(self):
        dto = PluginDto(
            id="calc",
            name="Calculator",
            runtime=PluginRuntime.PYTHON,
            icon=PluginImage(image_type=ImageType.EMOJI, image_data="🧮"),
            is_installed=False,
            is_disable=True,
            setting={"precision": "4"},
            setting_definitions=[{"type": "newline"}],
        )

        assert dto.setting_definitions == []
        assert dto.setting == {}
        assert dto.is_disable is False

    def test_descriptors_differing_only_in_is_disable_are_equal(self):
        wire = PluginDto.build(_metadata()).to_wire()

        enabled = PluginDto.from_wire({**wire, "isDisable": False})
        disabled = PluginDto.from_wire({**wire, "isDisable": True})

        assert enabled == disabled

    def test_string_false_counts_as_not_installed(self):
        wire = PluginDto.build(_metadata()).to_wire()
        dto = PluginDto.from_wire({**wire, "isInstalled": "false", "setting": {"a": "b"}})

        assert dto.is_installed is False
        assert dto.setting == {}


class TestInstalled:
    """Descriptors of installed plugins."""

    def test_build_copies_installed_state(self):
        state = _installed_state()
        dto = PluginDto.build(_metadata(), installed=state)

        assert dto.is_installed is True
        assert dto.is_disable is True
        assert dto.setting == {"mode": "a", "precision": "4"}
        assert dto.installed_state == state

    def test_is_disable_matters_when_installed(self):
        enabled = PluginDto.build(_metadata(), installed=_installed_state(is_disable=False))
        disabled = PluginDto.build(_metadata(), installed=_installed_state(is_disable=True))

        assert enabled != disabled

    def test_trigger_keywords_override(self):
        dto = PluginDto.build(_metadata(), installed=_installed_state(), trigger_keywords=["c", "="])

        assert dto.trigger_keywords == ["c", "="]

    def test_icon_override(self, tmp_path):
        icon = PluginImage(image_type=ImageType.ABSOLUTE, image_data=str(tmp_path / "icon.png"))
        dto = PluginDto.build(_metadata(), icon=icon)

        assert dto.icon == icon

    def test_system_flag(self):
        dto = PluginDto.build(_metadata(), is_system=True, installed=_installed_state())

        assert dto.is_system is True


class TestSerialization:
    """Wire form of PluginDto."""

    def test_wire_field_names(self):
        wire = PluginDto.build(_metadata()).to_wire()

        assert set(wire) == {
            "id", "name", "author", "version", "minHostVersion", "runtime",
            "description", "icon", "website", "entry", "screenshotUrls",
            "triggerKeywords", "commands", "supportedOS", "settingDefinitions",
            "setting", "isSystem", "isInstalled", "isDisable",
        }
        assert wire["icon"] == {"imageType": "emoji", "imageData": "🧮"}
        assert wire["runtime"] == "PYTHON"

    @pytest.mark.parametrize("installed", [None, _installed_state()])
    def test_round_trip_dict(self, installed):
        dto = PluginDto.build(_metadata(), installed=installed)

        assert PluginDto.from_wire(dto.to_wire()) == dto

    @pytest.mark.parametrize("installed", [None, _installed_state()])
    def test_round_trip_json(self, installed):
        dto = PluginDto.build(_metadata(), installed=installed)

        assert PluginDto.from_json(dto.to_json()) == dto

    def test_round_trip_with_empty_collections(self):
        metadata = _metadata(screenshot_urls=[], commands=[], supported_os=[], setting_definitions=[])
        dto = PluginDto.build(
            metadata,
            installed=InstalledPluginState(setting_definitions=[], setting={}, is_disable=False),
            trigger_keywords=[],
        )

        restored = PluginDto.from_json(dto.to_json())

        assert restored == dto
        assert restored.trigger_keywords == []
        assert restored.setting == {}
        assert restored.supported_os == frozenset()

    def test_sequence_order_preserved(self):
        dto = PluginDto.build(
            _metadata(),
            installed=_installed_state(),
            trigger_keywords=["z", "a", "m"],
        )

        restored = PluginDto.from_json(dto.to_json())

        assert restored.trigger_keywords == ["z", "a", "m"]
        assert restored.screenshot_urls == ["https://example.com/2.png", "https://example.com/1.png"]
        assert [c.command for c in restored.commands] == ["round", "hex"]
        assert [o.value for o in restored.setting_definitions[0].options] == ["b", "a"]

    def test_supported_os_serialized_sorted(self):
        dto = PluginDto.build(_metadata(supported_os=["Windows", "linux", "darwin"]))

        assert dto.to_wire()["supportedOS"] == ["darwin", "linux", "windows"]
        assert dto.supported_os == frozenset({"darwin", "linux", "windows"})

    def test_accepts_pascal_case_keys(self):
        dto = PluginDto.from_wire({
            "Id": "calc",
            "Name": "Calculator",
            "Runtime": "python",
            "Icon": "emoji:🧮",
            "TriggerKeywords": ["="],
            "SupportedOS": ["linux"],
            "IsInstalled": True,
            "IsDisable": True,
            "Setting": {"precision": "2"},
        })

        assert dto.runtime == PluginRuntime.PYTHON
        assert dto.is_installed is True
        assert dto.is_disable is True
        assert dto.setting == {"precision": "2"}

    def test_unknown_runtime_falls_back(self):
        wire = PluginDto.build(_metadata()).to_wire()
        dto = PluginDto.from_wire({**wire, "runtime": "LUA"})

        assert dto.runtime == PluginRuntime.UNKNOWN


class TestImmutability:
    def test_fields_cannot_be_assigned(self):
        dto = PluginDto.build(_metadata())

        with pytest.raises(ValidationError):
            dto.name = "Other"
