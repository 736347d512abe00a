"""Setup script for the deepvalidate package."""

import os
import re

from setuptools import find_packages, setup  # type: ignore


def get_version():
    """Get the version of the package."""
    init_path = os.path.join("deepvalidate", "__init__.py")
    with open(init_path) as f:
        content = f.read()
        match = re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]', content)
        if match:
            return match.group(1)
        raise RuntimeError("Unable to find version string.")


setup(
    name="deepvalidate",
    version=get_version(),
    packages=find_packages(include=["deepvalidate", "deepvalidate.*"]),
    package_dir={"": "."},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "deepvalidate=deepvalidate.cli.cli:cli",
        ],
    },
)
