from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="blobccl",
    version="0.1.0",
    description="Hoshen-Kopelman connected component labeling for grids and RGBA images",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["numpy"],
    extras_require={
        "image": ["Pillow"],
        "test": ["pytest", "Pillow"],
    },
)
