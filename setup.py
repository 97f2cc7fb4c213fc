from setuptools import setup, find_packages

setup(
    name="typeforge",
    version="1.0.0",
    description="TypeForge - Entity and relationship extraction from class and enum descriptors",
    author="Your Name",
    packages=find_packages(include=["typeforge", "typeforge.*"]),
    include_package_data=True,
    package_data={
        "typeforge.tests.fixtures": ["*.yaml"],
    },
    install_requires=[
        # Core data modeling and validation
        "pydantic>=2.0.0",

        # Environment variables
        "python-dotenv>=1.0.0",

        # Graph export
        "networkx>=3.0",

        # CLI and rich output
        "typer>=0.9.0",
        "rich>=13.0.0",

        # YAML schema files
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "typeforge = typeforge.cli:main",
        ],
    },
    python_requires=">=3.11",
    package_dir={"": "."},
)
