from gpuaccel.config import AcceleratorConfig
from gpuaccel.css.model import Stylesheet
from gpuaccel.transforms.base import Transform
from gpuaccel.transforms.gpu import (
    GPU_PROPERTIES,
    GpuAccelerationTransform,
    apply_gpu_properties,
    gpu_declarations,
)

BUILTIN_TRANSFORMS = [
    GpuAccelerationTransform(),
]

__all__ = [
    "BUILTIN_TRANSFORMS",
    "GPU_PROPERTIES",
    "GpuAccelerationTransform",
    "Transform",
    "apply_gpu_properties",
    "apply_transforms",
    "gpu_declarations",
]


def apply_transforms(
    sheet: Stylesheet, config: AcceleratorConfig, custom_transforms=None
) -> int:
    """Run built-in (and any custom) transforms over every rule block in *sheet*.

    Returns the number of rule blocks changed by at least one transform.
    """
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    changed = 0
    for rule in sheet.iter_rules():
        touched = False
        for t in transforms:
            touched = t.apply(rule, config) or touched
        if touched:
            changed += 1
    return changed
