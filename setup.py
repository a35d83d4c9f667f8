"""
Setup script for the Creo CSS build tool

Runtime Requirements:
- Dart Sass (`sass`) on PATH, or Node.js and npm so it can be installed
  into node_modules on first run

Usage:
- pip install -e .
- creo-build [all|expanded|compressed|lean|clean|watch|help]
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="creo-build",
    version="1.0.0",
    author="Creo Framework",
    description="Build tool producing expanded, compressed and lean Creo CSS bundles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["creo_build", "creo_build.*"]),
    package_data={
        "creo_build": [
            "config/*.yaml",
        ]
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "creo-build=creo_build.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
    ],
)
