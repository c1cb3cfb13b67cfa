"""Setup configuration for reviewmatrix"""

from setuptools import setup, find_packages

setup(
    name="github-review-matrix",
    version="0.1.0",
    description=(
        "CLI and library showing which reviewers owe reviews on which "
        "repositories' open pull requests across a GitHub organization."
    ),
    author="GitHub Review Matrix Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "review-matrix=reviewmatrix.main:main",
        ],
    },
)
