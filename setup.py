from setuptools import setup, find_packages
import os
import re

HERE = os.path.dirname(os.path.abspath(__file__))

# Top-level modules of the flat layout
PY_MODULES = [
    "common",
    "config",
    "exceptions",
    "logging_config",
    "main",
    "mcp_server",
    "middleware",
    "models",
    "server",
    "utils",
    "version",
]


def get_version():
    """Return package version as listed in `__version__` in `version.py`."""
    version_py_path = os.path.join(HERE, "version.py")
    with open(version_py_path, "r", encoding="utf-8") as f:
        version_py = f.read()

    match = re.search("__version__ = ['\"]([^'\"]+)['\"]", version_py)
    if match:
        return match.group(1)
    raise RuntimeError(f"Unable to find __version__ string in {version_py_path}")


with open(os.path.join(HERE, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(HERE, "requirements.txt"), "r", encoding="utf-8") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="youtube-mcp-server",
    version=get_version(),
    description="MCP server exposing read-only YouTube lookups: transcripts, video details, search, channels and comments",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=PY_MODULES,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": [
            "youtube-mcp-server=server:main",
            "youtube-mcp-stdio=mcp_server:main",
        ],
    },
)
