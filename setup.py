"""
Setup script for the TaskFlow service and CLI.
"""
from setuptools import setup, find_packages

setup(
    name="taskflow",
    version="0.1.0",
    packages=find_packages(include=["taskflow", "taskflow.*"]),
    install_requires=[
        "fastapi>=0.110.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "uvicorn>=0.27.0",
        "click>=8.1.0",
        "httpx>=0.25.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "taskflow=taskflow.__main__:main",
            "taskflow-cli=taskflow.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
