from setuptools import setup, find_namespace_packages

setup(
    name="solid-demos",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["solid_demos*"],
    ),
    python_requires=">=3.9",
    install_requires=["PyYAML"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "furo", "myst-parser"],
    },
    entry_points={
        "console_scripts": ["solid-demos=solid_demos.cli:main"],
    },
)
