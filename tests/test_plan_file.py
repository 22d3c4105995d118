import tempfile
import unittest
from pathlib import Path

from verify_pipeline.checks import DEFAULT_PLAN, FEATURES, OPT_IN_FEATURE, TARGET_PACKAGES, WASM_TARGET
from verify_pipeline.plan_file import dump_plan_yaml, load_plan_yaml, plan_from_dict


class TestPlanFromDict(unittest.TestCase):
    def test_empty_mapping_is_the_builtin_plan(self) -> None:
        self.assertEqual(DEFAULT_PLAN, plan_from_dict({}))

    def test_explicit_empty_lists_disable_sub_steps(self) -> None:
        plan = plan_from_dict({"opt_in": None, "packages": [], "features": []})
        ct = plan.cross_target
        self.assertIsNone(ct.opt_in)
        self.assertEqual((), ct.packages)
        self.assertEqual((), ct.features)
        self.assertEqual(WASM_TARGET, ct.target)

    def test_comma_separated_strings_are_accepted(self) -> None:
        plan = plan_from_dict({"packages": "a, b,,c", "features": "x"})
        self.assertEqual(("a", "b", "c"), plan.cross_target.packages)
        self.assertEqual(("x",), plan.cross_target.features)

    def test_invalid_shapes_raise(self) -> None:
        with self.assertRaises(ValueError):
            plan_from_dict({"packages": {"a": 1}})
        with self.assertRaises(ValueError):
            plan_from_dict({"opt_in": "pkg"})

    def test_opt_in_without_package_key_raises(self) -> None:
        with self.assertRaises(ValueError):
            plan_from_dict({"opt_in": {"feature": "x"}})
        with self.assertRaises(ValueError):
            plan_from_dict({"opt_in": {"package": "  ", "feature": "x"}})

    def test_explicit_null_package_disables_opt_in(self) -> None:
        plan = plan_from_dict({"opt_in": {"package": None}})
        self.assertIsNone(plan.cross_target.opt_in)

    def test_opt_in_feature_defaults_to_builtin(self) -> None:
        plan = plan_from_dict({"opt_in": {"package": "core-sdk"}})
        self.assertEqual("core-sdk", plan.cross_target.opt_in.package)
        self.assertEqual(OPT_IN_FEATURE, plan.cross_target.opt_in.feature)


class TestPlanYaml(unittest.TestCase):
    def test_load_partial_yaml_keeps_order(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "plan.yaml"
            p.write_text(
                "\n".join(
                    [
                        "target: thumbv7em-none-eabihf",
                        "opt_in:",
                        "  package: core-sdk",
                        "  feature: no-std",
                        "packages:",
                        "  - zeta",
                        "  - alpha",
                        "  - zeta",
                    ]
                )
                + "\n",
                encoding="utf-8",
            )
            plan = load_plan_yaml(p)

        ct = plan.cross_target
        self.assertEqual("thumbv7em-none-eabihf", ct.target)
        self.assertEqual("core-sdk", ct.opt_in.package)
        self.assertEqual("no-std", ct.opt_in.feature)
        self.assertEqual(("zeta", "alpha", "zeta"), ct.packages)
        self.assertEqual(FEATURES, ct.features)

    def test_dump_then_load_matches(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = dump_plan_yaml(Path(td) / "nested" / "plan.yaml", DEFAULT_PLAN)
            self.assertTrue(p.exists())
            text = p.read_text(encoding="utf-8")
            self.assertLess(text.index("target:"), text.index("packages:"))
            self.assertEqual(DEFAULT_PLAN, load_plan_yaml(p))
        self.assertEqual(TARGET_PACKAGES, DEFAULT_PLAN.cross_target.packages)

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_plan_yaml(Path(td) / "missing.yaml")

    def test_non_mapping_yaml_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "plan.yaml"
            p.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_plan_yaml(p)

    def test_unparseable_yaml_raises_value_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "plan.yaml"
            p.write_text("packages: [a, b\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_plan_yaml(p)


if __name__ == "__main__":
    unittest.main()
