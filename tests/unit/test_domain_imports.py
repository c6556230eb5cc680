from __future__ import annotations

import ast
from pathlib import Path

DOMAIN_ROOT = Path(__file__).resolve().parents[2] / "src" / "bistro" / "domain"
ALLOWED_PREFIXES = ("bistro.domain",)
STDLIB_MODULES = {"__future__", "abc", "dataclasses", "decimal", "enum", "typing"}


def _imported_modules(file_path: Path) -> list[tuple[int, str]]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((node.lineno, alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            found.append((node.lineno, node.module))
    return found


def test_domain_only_imports_stdlib_and_itself() -> None:
    offending: list[str] = []
    for file_path in sorted(DOMAIN_ROOT.rglob("*.py")):
        for line, module in _imported_modules(file_path):
            if module.split(".")[0] in STDLIB_MODULES:
                continue
            if module.startswith(ALLOWED_PREFIXES):
                continue
            offending.append(f"{file_path.relative_to(DOMAIN_ROOT)}:{line} -> {module}")

    assert offending == []


def test_domain_tree_is_scanned() -> None:
    assert any(DOMAIN_ROOT.rglob("entities.py"))
