from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="netmodel",
    version="0.1.0",
    description="Shortest-path traffic modeling with utilization and failure reports.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=["pandas>=1.5"],
    extras_require={"test": ["pytest", "networkx"]},
    entry_points={"console_scripts": ["netmodel=netmodel.cli:main"]},
)
