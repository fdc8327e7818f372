from setuptools import setup, find_packages

setup(
    name="nlu_features",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.5",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    description="Analysis feature selection models for NLU requests",
    author="Davis Kim",
)
