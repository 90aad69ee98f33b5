from __future__ import annotations

from pathlib import Path

from scripts.check_layout_purity import check_source

_PACKAGE_ROOT = Path(__file__).resolve().parents[4] / "carousel"


def test_env_reads_only_allowed_in_debug_config() -> None:
    src = "import os\nLEVEL = os.getenv('X')\n"
    assert check_source(src, "carousel/runtime/debug_config.py") == []
    assert check_source(src, "carousel/runtime/logging.py") == [
        "carousel/runtime/logging.py:2 env read outside debug config"
    ]


def test_layout_modules_reject_io_and_globals() -> None:
    src = "from pathlib import Path\n\ndef f():\n    global STATE\n"
    assert check_source(src, "carousel/layout/paging.py") == [
        "carousel/layout/paging.py:1 layout module imports pathlib",
        "carousel/layout/paging.py:4 layout module rebinds global state",
    ]


def test_shipped_package_is_clean() -> None:
    violations: list[str] = []
    for path in sorted(_PACKAGE_ROOT.rglob("*.py")):
        rel = path.relative_to(_PACKAGE_ROOT.parent).as_posix()
        violations.extend(check_source(path.read_text(encoding="utf-8"), rel))
    assert violations == []
