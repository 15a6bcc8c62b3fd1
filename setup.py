from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    """Read __version__ from src/strtemplate/__init__.py without importing it."""
    init_file = Path(__file__).parent / "src" / "strtemplate" / "__init__.py"
    for line in init_file.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/strtemplate/__init__.py")


setup(
    name="strtemplate",
    version=_read_version(),
    description="Mapped interpolation of string templates, with a URL percent-encoding processor",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["strtemplate", "strtemplate.*"]),
    extras_require={"test": ["pytest"]},
)
