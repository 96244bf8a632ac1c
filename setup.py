import runpy
from pathlib import Path

from setuptools import setup, find_packages

HERE = Path(__file__).resolve().parent
VERSION = runpy.run_path(str(HERE / "src" / "levelog" / "_version.py"))["PIP_VERSION"]

setup(
    name="levelog",
    version=VERSION,
    description="Leveled logging facade — TRACE..CRITICAL thresholds over a prefix/flags line writer, with a named-logger registry",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "dev": ["pytest>=7", "pytest-cov"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: System :: Logging",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
