"""Setup configuration for syncpick - Interactive Folder Backup."""

from setuptools import setup, find_packages
import os
import re

HERE = os.path.dirname(__file__)


def read_requirements():
    """Runtime dependencies, one per non-blank, non-comment line of requirements.txt."""
    with open(os.path.join(HERE, "requirements.txt"), "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


# The version lives in syncpick/cli.py so `syncpick --version` and the package agree
def read_version():
    """Extract __version__ from syncpick/cli.py.

    Raises:
        RuntimeError: If cli.py has no __version__ assignment.
    """
    with open(os.path.join(HERE, "syncpick", "cli.py"), "r", encoding="utf-8") as f:
        content = f.read()
    match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match:
        return match.group(1)
    raise RuntimeError("Unable to find __version__ in syncpick/cli.py")


setup(
    name="syncpick",
    version=read_version(),
    description="Interactive multi-folder backup with menu navigation, fuzzy search and rsync",
    author="syncpick contributors",
    license="MIT",
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "syncpick=syncpick.cli:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Archiving :: Backup",
        "Topic :: Utilities",
    ],
    keywords="backup rsync fzf dialog interactive folder-selection",
)
