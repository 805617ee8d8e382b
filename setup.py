# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="polysecret",
    version="0.1.0",
    description="Recover polynomial secrets from base-encoded points with exact arithmetic",
    author="polysecret contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "polysecret=polysecret.cli:main",
        ],
    },
)
