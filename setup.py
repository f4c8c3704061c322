from pathlib import Path
from setuptools import setup, find_packages
import re


def read_version():
    init = Path(__file__).parent / "src" / "datauri" / "__init__.py"
    match = re.search(r"^__version__ = '([^']+)'", init.read_text(encoding="utf-8"), re.M)
    if not match:
        raise RuntimeError("could not find __version__ in src/datauri/__init__.py")
    return match.group(1)


setup(
    name="datauri",
    version=read_version(),
    description="Convert a file into a self-contained data: URI",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["datauri = datauri.cli:main"]},
)
