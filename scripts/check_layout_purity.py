#!/usr/bin/env python3
"""Keep layout calculators free of env reads, I/O imports and global state."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path

ALLOWED_ENV_FILES = {
    "carousel/runtime/debug_config.py",
}
FORBIDDEN_LAYOUT_IMPORTS = {"io", "os", "pathlib", "socket", "threading", "time"}


def _is_env_get_call(node: ast.Call) -> bool:
    fn = node.func
    # os.getenv(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "getenv":
        if isinstance(fn.value, ast.Name) and fn.value.id == "os":
            return True
    # os.environ.get(...)
    if isinstance(fn, ast.Attribute) and fn.attr == "get":
        if isinstance(fn.value, ast.Attribute) and fn.value.attr == "environ":
            if isinstance(fn.value.value, ast.Name) and fn.value.value.id == "os":
                return True
    return False


def _imported_roots(node: ast.Import | ast.ImportFrom) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name.split(".")[0] for alias in node.names]
    if node.level or not node.module:
        return []
    return [node.module.split(".")[0]]


def check_source(src: str, rel: str) -> list[str]:
    """Return purity violations for one module's source text."""
    tree = ast.parse(src, filename=rel)
    is_layout = "/layout/" in f"/{rel}"
    violations: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and _is_env_get_call(node) and rel not in ALLOWED_ENV_FILES:
            violations.append(f"{rel}:{node.lineno} env read outside debug config")
        if not is_layout:
            continue
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            for root in _imported_roots(node):
                if root in FORBIDDEN_LAYOUT_IMPORTS:
                    violations.append(f"{rel}:{node.lineno} layout module imports {root}")
        if isinstance(node, ast.Global):
            violations.append(f"{rel}:{node.lineno} layout module rebinds global state")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check carousel layout purity.")
    parser.add_argument("--root", default="carousel")
    args = parser.parse_args()

    root = Path(args.root)
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        violations.extend(check_source(path.read_text(encoding="utf-8"), path.as_posix()))

    if violations:
        print("Layout purity violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
