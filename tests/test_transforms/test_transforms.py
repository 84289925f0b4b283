"""Tests for the GPU acceleration transform."""

from dataclasses import replace

import pytest

from gpuaccel.config import AcceleratorConfig
from gpuaccel.css import Declaration, RuleBlock, parse_stylesheet
from gpuaccel.transforms import (
    BUILTIN_TRANSFORMS,
    GPU_PROPERTIES,
    GpuAccelerationTransform,
    apply_gpu_properties,
    apply_transforms,
    gpu_declarations,
)


ALL_HINTS = [
    Declaration("transform", "translateZ(0)"),
    Declaration("will-change", "transform"),
    Declaration("backface-visibility", "hidden"),
    Declaration("perspective", "1000px"),
]

NO_FLAGS = AcceleratorConfig(
    enable_transform=False,
    enable_will_change=False,
    enable_backface=False,
    enable_perspective=False,
)


def _animated(selector: str = ".a") -> RuleBlock:
    return RuleBlock([selector], [Declaration("animation", "fade 1s")])


# ---------------------------------------------------------------------------
# apply_gpu_properties
# ---------------------------------------------------------------------------


class TestApplyGpuProperties:
    def test_all_flags_fixed_order(self):
        rule = _animated()
        apply_gpu_properties(rule, AcceleratorConfig())
        assert rule.declarations == [Declaration("animation", "fade 1s")] + ALL_HINTS

    def test_table_order(self):
        assert [decl for _, decl in GPU_PROPERTIES] == ALL_HINTS

    @pytest.mark.parametrize(
        "flag, expected",
        [
            ("enable_transform", ALL_HINTS[0]),
            ("enable_will_change", ALL_HINTS[1]),
            ("enable_backface", ALL_HINTS[2]),
            ("enable_perspective", ALL_HINTS[3]),
        ],
    )
    def test_single_flag(self, flag, expected):
        rule = _animated()
        apply_gpu_properties(rule, replace(NO_FLAGS, **{flag: True}))
        assert rule.declarations[1:] == [expected]

    def test_subset_keeps_order(self):
        config = replace(NO_FLAGS, enable_perspective=True, enable_transform=True)
        assert gpu_declarations(config) == [ALL_HINTS[0], ALL_HINTS[3]]

    def test_no_flags_no_change(self):
        rule = _animated()
        apply_gpu_properties(rule, NO_FLAGS)
        assert rule.declarations == [Declaration("animation", "fade 1s")]

    def test_never_important(self):
        rule = _animated()
        apply_gpu_properties(rule, AcceleratorConfig())
        assert not any(d.important for d in rule.declarations)

    def test_existing_properties_not_checked(self):
        rule = RuleBlock([".a"], [Declaration("transform", "scale(2)")])
        apply_gpu_properties(rule, replace(NO_FLAGS, enable_transform=True))
        assert rule.declarations == [
            Declaration("transform", "scale(2)"),
            Declaration("transform", "translateZ(0)"),
        ]

    def test_second_application_duplicates(self):
        rule = _animated()
        config = AcceleratorConfig()
        apply_gpu_properties(rule, config)
        apply_gpu_properties(rule, config)
        assert rule.declarations[1:] == ALL_HINTS + ALL_HINTS


# ---------------------------------------------------------------------------
# GpuAccelerationTransform
# ---------------------------------------------------------------------------


class TestGpuAccelerationTransform:
    def test_changes_matched_rule(self):
        rule = _animated()
        assert GpuAccelerationTransform().apply(rule, AcceleratorConfig()) is True
        assert len(rule.declarations) == 5

    def test_skips_unmatched_rule(self):
        rule = RuleBlock([".a"], [Declaration("color", "red")])
        assert GpuAccelerationTransform().apply(rule, AcceleratorConfig()) is False
        assert rule.declarations == [Declaration("color", "red")]

    def test_skips_excluded_rule(self):
        rule = _animated(".no-gpu")
        config = AcceleratorConfig(exclude_selectors=("no-gpu",))
        assert GpuAccelerationTransform().apply(rule, config) is False

    def test_matched_but_nothing_enabled(self):
        assert GpuAccelerationTransform().apply(_animated(), NO_FLAGS) is False


# ---------------------------------------------------------------------------
# apply_transforms
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_builtin_list(self):
        assert any(isinstance(t, GpuAccelerationTransform) for t in BUILTIN_TRANSFORMS)

    def test_counts_changed_rules_at_every_depth(self):
        sheet = parse_stylesheet(
            ".a { animation: x 1s } .b { color: red } "
            "@media print { .c { transition: all 1s } }"
        )
        assert apply_transforms(sheet, AcceleratorConfig()) == 2
        c_rule = sheet.nodes[2].children[0]
        assert c_rule.declarations[1:] == ALL_HINTS

    def test_custom_transform_runs_after_builtins(self):
        seen: list[list[str]] = []

        class Recorder:
            def apply(self, rule, config):
                seen.append(rule.properties)
                return False

        sheet = parse_stylesheet(".a { animation: x 1s }")
        apply_transforms(sheet, AcceleratorConfig(), custom_transforms=[Recorder()])
        assert seen == [["animation", "transform", "will-change", "backface-visibility", "perspective"]]

    def test_custom_transform_counts(self):
        class Marker:
            def apply(self, rule, config):
                rule.declarations.append(Declaration("contain", "paint"))
                return True

        sheet = parse_stylesheet(".a { color: red } .b { color: blue }")
        assert apply_transforms(sheet, AcceleratorConfig(), [Marker()]) == 2
