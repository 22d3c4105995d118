import ast
import unittest
from pathlib import Path
from typing import Iterator, Set


REPO_ROOT = Path(__file__).resolve().parents[1]

# tools/ is the low-level layer; verify_pipeline/ never launches processes
# itself, it goes through tools.core_cmd.
FORBIDDEN_IMPORTS = {
    "tools": {"verify_pipeline", "verify_cli"},
    "verify_pipeline": {"verify_cli", "subprocess"},
}


def imported_roots(py_file: Path) -> Iterator[str]:
    tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name.split(".", 1)[0]
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            yield node.module.split(".", 1)[0]


class TestDependencyBoundaries(unittest.TestCase):
    def test_dependency_direction_is_enforced(self) -> None:
        for pkg, forbidden in FORBIDDEN_IMPORTS.items():
            pkg_dir = REPO_ROOT / pkg
            self.assertTrue(pkg_dir.is_dir(), f"Missing package directory: {pkg_dir}")

            for py_file in sorted(pkg_dir.rglob("*.py")):
                bad: Set[str] = set(imported_roots(py_file)) & forbidden
                with self.subTest(module=str(py_file.relative_to(REPO_ROOT))):
                    self.assertFalse(bad, f"imports forbidden modules: {sorted(bad)}")


if __name__ == "__main__":
    unittest.main()
