from setuptools import find_packages, setup


setup(
    name="topology-graph-state",
    version="0.1.0",
    description="Topology snapshot diffing and hierarchical expansion state",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)
