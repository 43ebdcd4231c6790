from setuptools import find_packages, setup

setup(
    name="wlc",
    version="1.0.0",
    description="Check links of a local directory or url with the W3C link checker",
    packages=find_packages(include=["wlc", "wlc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12,<0.26",  # Command line interface (0.26+ no longer uses click)
        "click>=8.2",  # Usage errors and test runner
        "rich",  # Terminal formatting
        "pydantic>=2",  # Options, config and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Highlighted JSON/YAML output
        "jinja2",  # Template rendering for CLI outputs
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "wlc=wlc.cli:main",
        ],
    },
)
