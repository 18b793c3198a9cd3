from setuptools import setup, find_packages

setup(
    name="dwapi",
    version="0.1.0",
    description="Client for the DeviceWISE public JSON API",
    author="dwapi Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "requests>=2.28.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
