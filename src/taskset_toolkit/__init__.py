"""Top-level package for the Taskset Toolkit.

Provides subpackages:
- taskset_toolkit.core – assignment models, input validation and loading
- taskset_toolkit.expressions – the `\\[...]\\` randomization expression engine
- taskset_toolkit.builder – document assembly and PDF output
- taskset_toolkit.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("taskset_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
