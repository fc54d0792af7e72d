"""
Setup configuration for proxygen.

Runtime proxy class generation: interception chains and lazy
initialization for existing Python classes.
"""

from setuptools import setup, find_packages
import os


# Read version from package
def get_version():
    """Extract version from package __init__.py"""
    version_file = os.path.join(os.path.dirname(__file__), "proxygen", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    """Read long description from README.md if available"""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "proxygen: runtime proxy class generation for Python"


setup(
    name="proxygen",
    version=get_version(),
    author="proxygen Team",
    author_email="proxygen@example.com",
    description="Runtime proxy class generation with interceptor chains and lazy initialization",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    package_data={
        "proxygen.codegen.templates": ["*.j2"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
    install_requires=[
        "Jinja2>=3.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "isort>=5.0",
            "mypy>=0.900",
            "flake8>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "proxygen-info=proxygen.utils.info:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="proxy, code-generation, aop, interceptor, lazy-loading",
)
