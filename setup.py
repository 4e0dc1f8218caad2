"""Setup configuration for ngl-relay"""
from setuptools import setup, find_packages

setup(
    name="ngl-relay",
    version="0.1.0",
    description="HTTP relay that forwards an anonymous message to an NGL profile",
    packages=find_packages(include=["ngl_relay", "ngl_relay.*"]),
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "httpx>=0.27.0",
        "click>=8.1.7",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ngl-relay=ngl_relay.cli:cli",
        ],
    },
    python_requires=">=3.9",
)
