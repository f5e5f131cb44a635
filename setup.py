from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="islandgraph",
    version="0.1.0",
    description="Budget-constrained traversal of weighted island networks.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"islandgraph.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=["PyYAML", "jsonschema"],
    extras_require={
        "nx": ["networkx"],
        "test": ["pytest", "networkx"],
    },
    entry_points={"console_scripts": ["islandgraph=islandgraph.cli:main"]},
)
