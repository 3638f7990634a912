"""Plugin metadata shown in the page header.

Each build variant of a plugin is published under its own set of
identifiers (LV2, VST 2, VST 3, CLAP, GStreamer). The page assembler renders
these next to the composed manual body.
"""

from dataclasses import dataclass
from typing import Any

from plugdoc.models.mode import Mode


@dataclass(frozen=True)
class PluginMeta:
    """Published metadata of one plugin build.

    Attributes:
        name: Display name (e.g. "Referencer Stereo")
        description: One-sentence description
        acronym: Short name used in hosts (e.g. "R1S")
        page_id: Manual page identifier (e.g. "referencer_stereo")
        mode: Channel variant of the build
        lv2_uri: LV2 plugin URI
        vst2_id: VST 2.x four-character id
        vst3_uid: VST 3 UID
        clap_id: CLAP plugin id
        gst_uid: GStreamer element id
        version: (major, minor, micro)
    """

    name: str
    description: str
    acronym: str
    page_id: str
    mode: Mode
    lv2_uri: str
    vst2_id: str
    vst3_uid: str
    clap_id: str
    gst_uid: str
    version: tuple[int, int, int] = (1, 0, 0)

    @property
    def identifiers(self) -> list[tuple[str, str]]:
        """Format name and identifier pairs, in display order."""
        return [
            ("LV2", self.lv2_uri),
            ("VST 2.x", self.vst2_id),
            ("VST 3", self.vst3_uid),
            ("CLAP", self.clap_id),
            ("GStreamer", self.gst_uid),
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "acronym": self.acronym,
            "page_id": self.page_id,
            "mode": str(self.mode),
            "identifiers": dict(self.identifiers),
            "version": ".".join(str(v) for v in self.version),
        }


REFERENCER_DESCRIPTION = (
    "Referencer plugin allows you to load your preferred reference files "
    "and compare them with your mix"
)

REFERENCER_MONO = PluginMeta(
    name="Referencer Mono",
    description=REFERENCER_DESCRIPTION,
    acronym="R1M",
    page_id="referencer_mono",
    mode=Mode.MONO,
    lv2_uri="http://lsp-plug.in/plugins/lv2/referencer_mono",
    vst2_id="rf1m",
    vst3_uid="rf1m    rf1m",
    clap_id="in.lsp-plug.referencer_mono",
    gst_uid="referencer_mono",
)

REFERENCER_STEREO = PluginMeta(
    name="Referencer Stereo",
    description=REFERENCER_DESCRIPTION,
    acronym="R1S",
    page_id="referencer_stereo",
    mode=Mode.STEREO,
    lv2_uri="http://lsp-plug.in/plugins/lv2/referencer_stereo",
    vst2_id="rf1s",
    vst3_uid="rf1s    rf1s",
    clap_id="in.lsp-plug.referencer_stereo",
    gst_uid="referencer_stereo",
)

_PLUGINS_BY_MODE: dict[Mode, PluginMeta] = {
    Mode.MONO: REFERENCER_MONO,
    Mode.STEREO: REFERENCER_STEREO,
}


def plugin_for_mode(mode: Mode | str) -> PluginMeta:
    """Get the Referencer build metadata for a mode.

    Raises:
        UnknownMode: If the mode cannot be resolved
    """
    return _PLUGINS_BY_MODE[Mode.parse(mode)]
