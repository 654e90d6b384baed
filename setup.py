"""Setup script for Full Graph Generators."""

from setuptools import setup, find_packages
from pathlib import Path

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
with open(requirements_path, "r", encoding="utf-8") as f:
    requirements = [
        line.strip()
        for line in f
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="full_graphs",
    version="0.1.0",
    description="Deterministic full graph and full citation graph generators",
    classifiers=[
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"full_graphs": ["default_config.yaml"]},
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.4"],
        "dev": ["pytest>=7.4", "pytest-cov>=4.1", "mypy>=1.5"],
    },
    zip_safe=False,
)
