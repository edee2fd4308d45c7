"""Package Layout — every module carries a module docstring."""

import ast
from pathlib import Path

import pytest

import cicd_sample

_PACKAGE_DIR = Path(cicd_sample.__file__).parent
_MODULES = sorted(_PACKAGE_DIR.rglob("*.py"))


@pytest.mark.parametrize(
    "path", _MODULES, ids=lambda p: str(p.relative_to(_PACKAGE_DIR)),
)
def test_module_has_docstring(path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    assert ast.get_docstring(tree), f"{path.name} has no module docstring"
