from pathlib import Path

from setuptools import setup, find_packages


def read_version():
    """Load PIP_VERSION from src/logtap/_version.py without importing the package."""
    namespace = {}
    version_file = Path(__file__).parent / "src" / "logtap" / "_version.py"
    exec(version_file.read_text(encoding="utf-8"), namespace)
    return namespace["PIP_VERSION"]


setup(
    name="logtap",
    version=read_version(),
    description="Inline tap logging: log a value with label and call site, get the value back",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "dev": ["pytest", "pytest-cov"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
