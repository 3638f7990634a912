"""Page renderer for plugin manuals (Principle: Reproducibility).

Wraps a composed manual body in page chrome using Jinja2 templates: the
plugin header with name, description, version and format identifiers.
All output is deterministic - same template and mode always produce the
same page.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from plugdoc.composer import VariantComposer
from plugdoc.config import PlugdocConfig
from plugdoc.models.mode import Mode
from plugdoc.models.nodes import Document
from plugdoc.models.plugin import PluginMeta, plugin_for_mode
from plugdoc.renderers.filters import collapse_blank_lines, format_version

logger = logging.getLogger(__name__)


class PageRenderer:
    """Renders manual pages for one build variant at a time.

    The manual body comes from VariantComposer; this class only adds the
    surrounding page. With ``wrap_page`` disabled in the config, the bare
    body is returned.

    Usage:
        renderer = PageRenderer(config)
        html = renderer.render(REFERENCER_MANUAL, Mode.STEREO)
    """

    def __init__(
        self,
        config: PlugdocConfig | None = None,
        composer: VariantComposer | None = None,
    ) -> None:
        """Initialize the page renderer.

        Args:
            config: plugdoc configuration
            composer: Composer used for manual bodies
        """
        self.config = config or PlugdocConfig()
        self.composer = composer or VariantComposer()

        self._env = Environment(
            loader=PackageLoader("plugdoc", "templates"),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["format_version"] = format_version
        self._env.filters["collapse_blank_lines"] = collapse_blank_lines

    def render(
        self,
        document: Document,
        mode: Mode | str,
        plugin: PluginMeta | None = None,
        template_name: str = "page.html.j2",
    ) -> str:
        """Render a manual page.

        Args:
            document: Manual template
            mode: Build variant
            plugin: Plugin metadata for the header (defaults to the mode's build)
            template_name: Page template to use

        Returns:
            Rendered page (or bare body if page wrapping is disabled)

        Raises:
            UnknownMode: If the mode is not a recognized variant
            MalformedTemplate: If the manual is malformed for this mode
            ValueError: If the page template cannot be loaded or rendered
        """
        resolved = Mode.parse(mode)
        body = self.composer.render(document, resolved)

        if not self.config.output.wrap_page:
            return body

        try:
            template = self._env.get_template(template_name)
        except Exception as e:
            logger.error("Failed to load template %s: %s", template_name, e)
            raise ValueError(f"Template not found: {template_name}") from e

        context = self._build_context(body, resolved, plugin or plugin_for_mode(resolved))

        try:
            rendered = template.render(**context)
        except Exception as e:
            logger.error("Page rendering failed: %s", e)
            raise ValueError(f"Page rendering failed: {e}") from e

        logger.info("Rendered %s page (%d characters)", context["plugin"].page_id, len(rendered))
        return rendered

    def _build_context(self, body: str, mode: Mode, plugin: PluginMeta) -> dict[str, Any]:
        return {
            "body": body,
            "mode": str(mode),
            "plugin": plugin,
            "site_title": self.config.page.site_title,
            "show_identifiers": self.config.page.show_identifiers,
        }

    def render_to_file(
        self,
        document: Document,
        mode: Mode | str,
        output_path: Path,
        plugin: PluginMeta | None = None,
    ) -> Path:
        """Render a manual page and write it to a file.

        The page is fully rendered before the file is opened, so a failed
        render never leaves a truncated file behind.

        Returns:
            Path to written file
        """
        content = self.render(document, mode, plugin)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote manual page to %s", output_path)

        return output_path

    def preview(self, document: Document, mode: Mode | str, max_lines: int = 50) -> str:
        """Render a page for one variant and keep only its first max_lines lines.

        The cut is marked with the variant and the number of hidden lines.
        """
        resolved = Mode.parse(mode)
        lines = self.render(document, resolved).splitlines()
        hidden = len(lines) - max_lines
        if hidden <= 0:
            return "\n".join(lines)

        return "\n".join(lines[:max_lines] + [f"<!-- {resolved}: {hidden} more lines -->"])
