"""Stylesheet acceleration pipeline: tokenize, parse, match, inject, render.

Parse failures never reach the caller: the original text is returned
unchanged and the failure is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gpuaccel.config import AcceleratorConfig
from gpuaccel.css.errors import CSSError
from gpuaccel.css.lexer import tokenize
from gpuaccel.css.parser import parse
from gpuaccel.css.serializer import render
from gpuaccel.matcher import is_matched
from gpuaccel.transforms import apply_transforms

__all__ = ["TransformReport", "accelerate", "transform"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformReport:
    """Outcome of one pipeline run.

    Attributes:
        output: The transformed CSS, or the untouched input on failure.
        rules_total: Rule blocks found at any depth.
        rules_matched: Rule blocks accepted by the matcher.
        rules_changed: Rule blocks that received at least one declaration.
        error: The lex/parse error that triggered the fallback, if any.
    """

    output: str
    rules_total: int = 0
    rules_matched: int = 0
    rules_changed: int = 0
    error: CSSError | None = None

    @property
    def fell_back(self) -> bool:
        return self.error is not None


def accelerate(
    css_text: str,
    config: AcceleratorConfig,
    *,
    compact: bool = False,
    custom_transforms=None,
) -> TransformReport:
    """Run the full pipeline over *css_text* and report what happened."""
    try:
        sheet = parse(tokenize(css_text))
    except CSSError as exc:
        logger.warning("CSS parser error, returning original stylesheet: %s", exc)
        return TransformReport(output=css_text, error=exc)

    rules = list(sheet.iter_rules())
    matched = sum(1 for rule in rules if is_matched(rule, config))
    changed = apply_transforms(sheet, config, custom_transforms)
    output = render(sheet, compact=compact)

    logger.debug(
        "Accelerated stylesheet: rules=%d matched=%d changed=%d",
        len(rules),
        matched,
        changed,
    )
    return TransformReport(
        output=output,
        rules_total=len(rules),
        rules_matched=matched,
        rules_changed=changed,
    )


def transform(css_text: str, config: AcceleratorConfig) -> str:
    """Return *css_text* with GPU hints injected into matched rule blocks."""
    return accelerate(css_text, config).output
