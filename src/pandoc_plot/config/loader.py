# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load configuration from YAML documents."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Final

import panflute as pf
import yaml
from pydantic import ValidationError

from ..constants import CONFIG_FILE_NAME, CONFIG_META_KEY
from .models import ConfigError, Configuration

EXAMPLE_CONFIGURATION: Final[str] = """\
# Example configuration for pandoc-plot.
# Every key is optional; missing keys take the value shown here.

# Directory where figures are saved, relative to the working directory.
directory: plots/

# Whether to link the source code of every figure in its caption.
source: false

# Default dots-per-inch. Some toolkits ignore this value.
dpi: 80

# Default format of figures: png, pdf, svg, jpg, eps, gif, tif, webp or html.
format: PNG

# Pandoc format in which captions are written.
caption_format: markdown+tex_math_dollars

# Render the figures of one document concurrently.
parallel: false

logging:
  # One of debug, info, warning, error, silent.
  verbosity: warning
  # Uncomment to write diagnostics to a file instead of stderr.
  # filepath: pandoc-plot.log

# Toolkit sections accept directory, format, dpi, source, preamble and
# executable, which override the global defaults above.
matplotlib:
  # preamble: matplotlib.py
  tight_bbox: false
  transparent: false
  executable: python

plotly_python:
  executable: python

plotly_r:
  executable: Rscript

matlabplot:
  executable: matlab

mathplot:
  executable: math

octaveplot:
  executable: octave

ggplot2:
  executable: Rscript

gnuplot:
  executable: gnuplot

graphviz:
  executable: dot
"""


def load_configuration(path: Path) -> Configuration:
    """Read configuration from the YAML file at ``path``.

    Missing keys take their default values and an empty file yields the
    default configuration.

    Args:
        path: YAML document to load.

    Returns:
        Configuration: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file {path}: {exc}") from exc
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in configuration file {path}: {exc}") from exc
    if payload is None:
        return Configuration()
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Configuration at {path} must be a mapping")
    try:
        return Configuration.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc


def configuration_path_from_meta(doc: pf.Doc) -> Path | None:
    """Return the configuration path stored under ``plot-configuration``.

    The key may be set in the document front matter or with pandoc's
    ``-M plot-configuration=...`` flag.
    """

    value = doc.get_metadata(CONFIG_META_KEY, default=None, builtin=True)
    if isinstance(value, str) and value.strip():
        return Path(value.strip())
    return None


def resolve_configuration(
    doc: pf.Doc | None = None,
    *,
    explicit: Path | None = None,
    cwd: Path | None = None,
) -> Configuration:
    """Locate and load the configuration that applies to ``doc``.

    Lookup order is ``explicit``, then document metadata, then
    ``.pandoc-plot.yml`` in ``cwd``, then built-in defaults.
    """

    if explicit is not None:
        return load_configuration(explicit)
    if doc is not None:
        meta_path = configuration_path_from_meta(doc)
        if meta_path is not None:
            return load_configuration(meta_path)
    candidate = (cwd or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.is_file():
        return load_configuration(candidate)
    return Configuration()


def example_configuration() -> str:
    """Return a commented YAML document listing every configuration key."""

    return EXAMPLE_CONFIGURATION


__all__ = [
    "EXAMPLE_CONFIGURATION",
    "configuration_path_from_meta",
    "example_configuration",
    "load_configuration",
    "resolve_configuration",
]
