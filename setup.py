from setuptools import setup, find_packages

setup(
    name="grafana_metrics",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    description="Prometheus exposition text generator for Grafana dashboards",
)
