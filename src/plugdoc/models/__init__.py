"""plugdoc data models.

This module exports the core entities used throughout the application:
- Mode: Build variant selector (mono/stereo)
- Text, Conditional, Container, Document: Template node tree
- PluginMeta: Published metadata of a plugin build
"""

from plugdoc.models.mode import Mode, mode_from_page
from plugdoc.models.nodes import (
    Conditional,
    Container,
    Document,
    ModeIn,
    Node,
    Text,
)
from plugdoc.models.plugin import PluginMeta, plugin_for_mode

__all__ = [
    "Mode",
    "mode_from_page",
    "Node",
    "Text",
    "Conditional",
    "Container",
    "Document",
    "ModeIn",
    "PluginMeta",
    "plugin_for_mode",
]
