"""Setup script for the syllabus extraction engine."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="syllabus-engine",
    version="0.1.0",
    author="Syllabus Engine",
    description="Extract evaluations, weekly schedule and course metadata from syllabus text",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.8",
    install_requires=[
        "pdfplumber>=0.10.0",
        "python-docx>=1.0.0",
        "dateparser>=1.2.0",
        "icalendar>=5.0.0",
        "pytz>=2023.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "syllabus-parse=syllabus_engine.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Education",
        "Topic :: Text Processing",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
