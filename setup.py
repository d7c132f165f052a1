from setuptools import find_packages, setup


setup(
    name="collab-centrality",
    version="0.1.0",
    description="Structural centrality metrics and network rendering for collaboration edge lists",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "matplotlib>=3.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "collab-centrality=graph_algorithms.main:main",
        ],
    },
)
