# setup.py
from setuptools import setup, find_packages

setup(
    name="stepwise",
    version="0.1.0",
    description="Scheme-like S-expression interpreter that traces substitution-model evaluation",
    packages=find_packages(include=["stepwise", "stepwise.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["stepwise = stepwise.__main__:main"],
    },
    zip_safe=False,
)
