"""Package setup for update_webhooks."""

from setuptools import setup, find_packages

setup(
    name="update-webhooks",
    version="1.0.0",
    description="Extract the webhook URLs declared in a YAML service definition",
    packages=find_packages(include=["update_webhooks", "update_webhooks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "update-webhooks=update_webhooks.cli:main",
        ],
    },
)
