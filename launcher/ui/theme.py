"""Theme record - the style parameters the UI binds to each region."""

import re
from typing import Annotated

from pydantic import AfterValidator, Field, StrictInt

from launcher.models.wire import WireModel

_HEX_COLOR = r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
_FUNCTIONAL_COLOR = r"(?:rgba?|hsla?)\(\s*[0-9.%]+(?:\s*[,/\s]\s*[0-9.%]+){2,3}\s*\)"
_NAMED_COLOR = r"[a-zA-Z]+"
_COLOR_RE = re.compile(f"{_HEX_COLOR}|{_FUNCTIONAL_COLOR}|{_NAMED_COLOR}")


def check_color(value: str) -> str:
    """Accept hex, rgb/rgba/hsl/hsla and plain named colors."""
    if not _COLOR_RE.fullmatch(value):
        raise ValueError(f"not a color: {value!r}")
    return value


Color = Annotated[str, AfterValidator(check_color)]
Geometry = Annotated[StrictInt, Field(ge=0)]


class Theme(WireModel):
    """One selectable UI skin.

    Every field is required. Paddings and radii are non-negative integers in
    device-independent pixels.
    """

    theme_id: str = Field(..., min_length=1)
    theme_name: str
    theme_author: str
    theme_url: str

    app_background_color: Color
    app_padding_left: Geometry
    app_padding_top: Geometry
    app_padding_right: Geometry
    app_padding_bottom: Geometry

    result_container_padding_left: Geometry
    result_container_padding_top: Geometry
    result_container_padding_right: Geometry
    result_container_padding_bottom: Geometry
    result_item_border_radius: Geometry
    result_item_padding_left: Geometry
    result_item_padding_top: Geometry
    result_item_padding_right: Geometry
    result_item_padding_bottom: Geometry
    result_item_active_background_color: Color

    query_box_font_color: Color
    query_box_background_color: Color
    query_box_border_radius: Geometry

    action_container_background_color: Color
    action_container_header_font_color: Color
    action_container_padding_left: Geometry
    action_container_padding_top: Geometry
    action_container_padding_right: Geometry
    action_container_padding_bottom: Geometry
    action_item_active_background_color: Color
    action_query_box_font_color: Color
    action_query_box_background_color: Color
    action_query_box_border_radius: Geometry
