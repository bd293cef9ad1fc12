from setuptools import setup, find_packages

setup(
    name="densegrid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"densegrid": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_view=densegrid.scripts.show_grid:main",
        ]
    },
)
