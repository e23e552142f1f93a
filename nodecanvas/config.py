"""
Runtime configuration, read from NODECANVAS_* environment variables.

server/main.py loads a .env file before calling `load_config()`, so values
can live there instead of the shell environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "NODECANVAS_"


@dataclass
class EditorConfig:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    # Fixed chrome around the canvas: the toolbar above it and the output
    # panel to its right.
    toolbar_height: float = 48.0
    output_panel_width: float = 400.0

    # Host window size assumed until the first resize arrives.
    host_width: float = 1280.0
    host_height: float = 800.0

    def canvas_size(self, host_width: float, host_height: float):
        return (host_width - self.output_panel_width, host_height - self.toolbar_height)


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def load_config(env: Optional[Mapping[str, str]] = None) -> EditorConfig:
    env = os.environ if env is None else env
    config = EditorConfig()

    for field_name, cast in (
        ("host", str),
        ("port", int),
        ("log_level", str),
        ("toolbar_height", float),
        ("output_panel_width", float),
        ("host_width", float),
        ("host_height", float),
    ):
        raw = _get(env, field_name.upper())
        if raw is None:
            continue
        try:
            setattr(config, field_name, cast(raw))
        except ValueError:
            raise ValueError(f"Invalid value for {ENV_PREFIX}{field_name.upper()}: {raw!r}")

    config.log_level = config.log_level.upper()
    return config
