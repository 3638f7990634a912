"""plugdoc configuration system.

Configuration is YAML-based with minimal CLI overrides (--output, --mode, --ci).
Supports environment variable substitution (${VAR}, ${VAR:-fallback}) in
config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.plugdoc/config.yaml
3. ./plugdoc.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from plugdoc.models.mode import Mode

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        directory: Directory that receives rendered pages
        filename: File name pattern, must contain "{page}" (the page id)
        wrap_page: Wrap the composed body in page chrome (header, identifiers)
    """

    directory: str = "docs/manuals/plugins"
    filename: str = "{page}.html"
    wrap_page: bool = True

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if "{page}" not in self.filename:
            raise ValueError(f"Output filename must contain '{{page}}': {self.filename}")

    def path_for(self, page_id: str) -> Path:
        """Get the output path of a manual page."""
        return Path(self.directory) / self.filename.format(page=page_id)


@dataclass
class PageConfig:
    """Page chrome configuration.

    Attributes:
        site_title: Site name shown in the page title
        show_identifiers: Render the plugin format identifier table
    """

    site_title: str = "LSP Plugins"
    show_identifiers: bool = True


@dataclass
class PlugdocConfig:
    """Top-level plugdoc configuration.

    Attributes:
        output: Output location and page wrapping
        page: Page chrome settings
        manual: Name of the manual template to render
        modes: Modes rendered by the build command
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    page: PageConfig = field(default_factory=PageConfig)
    manual: str = "referencer"
    modes: list[Mode] = field(default_factory=lambda: list(Mode))

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

# ${NAME} or ${NAME:-fallback}
_ENV_VAR_RE = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _expand(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    resolved = os.environ.get(name, fallback)
    if resolved is None:
        raise ValueError(f"Environment variable not set: {name}")
    return resolved


def substitute_env_vars(value: Any) -> Any:
    """Expand ``${VAR}`` and ``${VAR:-fallback}`` in every string of a config tree.

    Raises:
        ValueError: If a referenced variable is not set and has no fallback
    """
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(_expand, value)
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    return value


# =============================================================================
# Config File Discovery
# =============================================================================

# Searched relative to the project directory, first match wins
CONFIG_LOCATIONS: tuple[Path, ...] = (
    Path(".plugdoc") / "config.yaml",
    Path("plugdoc.yaml"),
)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Return the first of CONFIG_LOCATIONS present under start_path (default: cwd)."""
    root = (start_path or Path.cwd()).resolve()
    return next(
        (root / location for location in CONFIG_LOCATIONS if (root / location).is_file()),
        None,
    )


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> PlugdocConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        PlugdocConfig instance

    Raises:
        ValueError: On invalid values
        UnknownMode: If a configured mode is not a recognized variant
    """
    data = substitute_env_vars(data)

    config = PlugdocConfig()

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            directory=str(output_data.get("directory", config.output.directory)),
            filename=output_data.get("filename", config.output.filename),
            wrap_page=bool(output_data.get("wrap_page", config.output.wrap_page)),
        )

    if "page" in data:
        page_data = data["page"] or {}
        config.page = PageConfig(
            site_title=page_data.get("site_title", config.page.site_title),
            show_identifiers=bool(page_data.get("show_identifiers", config.page.show_identifiers)),
        )

    if "manual" in data:
        config.manual = data["manual"]

    if "modes" in data:
        modes = data["modes"] or []
        if not isinstance(modes, list):
            raise ValueError(f"'modes' must be a list (got {type(modes).__name__})")
        config.modes = [Mode.parse(m) for m in modes]

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> PlugdocConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        PlugdocConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = PlugdocConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# plugdoc configuration

# Output settings
output:
  directory: "docs/manuals/plugins"
  filename: "{page}.html"   # {page} is replaced by the page id (e.g. referencer_stereo)
  wrap_page: true           # false = emit the bare manual body

# Page chrome
page:
  site_title: "LSP Plugins"
  show_identifiers: true    # LV2 / VST / CLAP / GStreamer identifier table

# Manual template and the variants rendered by `plugdoc build`
manual: "referencer"
modes:
  - mono
  - stereo
'''
