"""GPU acceleration transform: append compositing hints to matched rule blocks."""

from __future__ import annotations

from gpuaccel.config import AcceleratorConfig
from gpuaccel.css.model import Declaration, RuleBlock
from gpuaccel.matcher import is_matched

# (config flag, declaration) in injection order.
GPU_PROPERTIES: tuple[tuple[str, Declaration], ...] = (
    ("enable_transform", Declaration("transform", "translateZ(0)")),
    ("enable_will_change", Declaration("will-change", "transform")),
    ("enable_backface", Declaration("backface-visibility", "hidden")),
    ("enable_perspective", Declaration("perspective", "1000px")),
)


def gpu_declarations(config: AcceleratorConfig) -> list[Declaration]:
    """The declarations *config* enables, in fixed injection order."""
    return [decl for flag, decl in GPU_PROPERTIES if getattr(config, flag)]


def apply_gpu_properties(rule: RuleBlock, config: AcceleratorConfig) -> None:
    """Append the enabled GPU declarations to *rule*.

    Existing declarations are left alone and nothing is deduplicated, so
    running this twice on the same rule appends the hints twice.
    """
    rule.declarations.extend(gpu_declarations(config))


class GpuAccelerationTransform:
    """Inject GPU hints into every rule block the matcher accepts."""

    def apply(self, rule: RuleBlock, config: AcceleratorConfig) -> bool:
        if not is_matched(rule, config):
            return False
        before = len(rule.declarations)
        apply_gpu_properties(rule, config)
        return len(rule.declarations) != before
