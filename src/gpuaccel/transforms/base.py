"""Base protocol for rule-block transforms."""

from __future__ import annotations

from typing import Protocol

from gpuaccel.config import AcceleratorConfig
from gpuaccel.css.model import RuleBlock


class Transform(Protocol):
    """An in-place rule-block rewrite step.

    ``apply`` returns True when it changed the rule.
    """

    def apply(self, rule: RuleBlock, config: AcceleratorConfig) -> bool: ...
