"""Top-level package for the Question Toolkit.

Provides subpackages:
- question_toolkit.core – models, validation and serialization
- question_toolkit.builder – transformation functions over question collections
"""


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("question-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
