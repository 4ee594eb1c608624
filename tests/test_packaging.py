"""Packaging regression tests."""

from pathlib import Path


def test_source_layout():
    """The package lives under src/ with kernel and adapters subpackages."""
    here = Path(__file__).resolve().parent
    src_pkg = here.parent / "src" / "statuslog"

    assert src_pkg.exists(), "statuslog package should exist in src/"
    assert (src_pkg / "kernel").exists(), "statuslog.kernel should exist"
    assert (src_pkg / "adapters").exists(), "statuslog.adapters should exist"


def test_kernel_does_not_import_outer_layers():
    """Kernel modules only import from the kernel, pydantic and the stdlib."""
    here = Path(__file__).resolve().parent
    kernel = here.parent / "src" / "statuslog" / "kernel"
    for path in kernel.glob("*.py"):
        text = path.read_text(encoding="utf-8")
        for forbidden in ("statuslog.api", "statuslog.cli", "statuslog.adapters", "statuslog.config", "import logging"):
            assert forbidden not in text, f"{path.name} imports {forbidden}"


def test_import_boundary():
    import statuslog
    import statuslog.kernel.squash  # noqa: F401
    import statuslog.adapters.memory  # noqa: F401

    assert hasattr(statuslog, "squash_logs")
