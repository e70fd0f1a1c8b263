"""Image references used for plugin icons."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import model_validator

from launcher.models.wire import WireModel


class ImageType(str, Enum):
    """How ``image_data`` should be interpreted by the UI."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    BASE64 = "base64"
    SVG = "svg"
    URL = "url"
    EMOJI = "emoji"


class PluginImage(WireModel):
    """An image given either as a path, encoded data, a URL or an emoji."""

    image_type: ImageType
    image_data: str

    @classmethod
    def parse(cls, raw: str) -> "PluginImage":
        """Parse the ``"<type>:<data>"`` form used in plugin.json.

        Only the first colon separates the type, so ``url:https://...`` and
        ``base64:data:image/png;base64,...`` keep their data intact.
        """
        prefix, sep, data = raw.partition(":")
        if not sep:
            raise ValueError(f"Image reference must look like '<type>:<data>', got {raw!r}")
        try:
            image_type = ImageType(prefix.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown image type {prefix!r} in {raw!r}") from None
        return cls(image_type=image_type, image_data=data)

    @model_validator(mode="before")
    @classmethod
    def parse_string_form(cls, data: Any) -> Any:
        if isinstance(data, str):
            image = cls.parse(data)
            return {"imageType": image.image_type, "imageData": image.image_data}
        return data

    def resolve(self, base_dir: Path) -> "PluginImage":
        """Turn a relative image into an absolute one rooted at ``base_dir``."""
        if self.image_type != ImageType.RELATIVE:
            return self
        return PluginImage(
            image_type=ImageType.ABSOLUTE,
            image_data=str((base_dir / self.image_data).resolve()),
        )


DEFAULT_PLUGIN_ICON = PluginImage(image_type=ImageType.EMOJI, image_data="🧩")
