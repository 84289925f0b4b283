"""gpuaccel: inject GPU-acceleration hints into CSS stylesheets."""
from __future__ import annotations

from gpuaccel.config import AcceleratorConfig, ConfigError
from gpuaccel.css import CSSError, LexError, ParseError
from gpuaccel.pipeline import TransformReport, accelerate, transform

__version__ = "1.0.0"

__all__ = [
    "AcceleratorConfig",
    "CSSError",
    "ConfigError",
    "LexError",
    "ParseError",
    "TransformReport",
    "accelerate",
    "transform",
]
