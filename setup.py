# setup.py
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line for line in fh.read().splitlines()
                    if line and not line.startswith("#")]

setup(
    name="rerank-summarizer",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Multi-method extractive summarizer with quality metrics and visualization data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/rerank-summarizer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "rerank-summarizer=main:main",
        ],
    },
)
