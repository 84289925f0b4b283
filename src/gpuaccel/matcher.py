"""Decide which rule blocks are eligible for GPU acceleration."""

from __future__ import annotations

from gpuaccel.config import AcceleratorConfig
from gpuaccel.css.model import RuleBlock

__all__ = ["has_target_property", "is_excluded", "is_matched"]


def is_excluded(rule: RuleBlock, config: AcceleratorConfig) -> bool:
    """True if any selector contains any non-empty exclude entry."""
    for exclude in config.exclude_selectors:
        if not exclude:
            continue
        for selector in rule.selectors:
            if exclude in selector:
                return True
    return False


def has_target_property(rule: RuleBlock, config: AcceleratorConfig) -> bool:
    """True if any declaration's property contains any non-empty target entry."""
    for decl in rule.declarations:
        for target in config.target_properties:
            if target and target in decl.property:
                return True
    return False


def is_matched(rule: RuleBlock, config: AcceleratorConfig) -> bool:
    """Exclusion wins over targeting; both are plain substring tests."""
    if is_excluded(rule, config):
        return False
    return has_target_property(rule, config)
