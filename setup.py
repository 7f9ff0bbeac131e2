from setuptools import setup

setup(
    name="prim_forest",
    version='1.0',
    description='Generic adjacency-map graphs and minimum spanning forests built with Prim\'s algorithm',
    packages=["prim_forest"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "prim-forest=prim_forest.cli:main",
        ],
    },
)
