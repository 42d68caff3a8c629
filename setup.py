"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="exercise-tracker",
    version="1.0.0",
    description="Exercise tracking REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "motor>=3.3",
        "pymongo>=4.6",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-multipart>=0.0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.26",
        ],
    },
    python_requires=">=3.10",
)
