"""setuptools / py2app setup for PayTimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

from setuptools import find_packages, setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "plist": {
        "CFBundleName": "PayTimer",
        "CFBundleDisplayName": "PayTimer",
        "CFBundleIdentifier": "com.paytimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="PayTimer",
    version="0.1.0",
    packages=find_packages(include=["paytimer", "paytimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
    entry_points={"gui_scripts": ["paytimer = paytimer.__main__:main"]},
)
