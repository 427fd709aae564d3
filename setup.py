# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetfs",
    version="0.1.0",
    description="Embed a directory tree into Python source and serve it from an in-memory filesystem",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetfs", "assetfs.*"]),
    python_requires=">=3.8",
    install_requires=[
        "jinja2",  # Asset templating and generated module rendering
    ],
    extras_require={
        "test": [
            "pytest",
            "requests",  # HTTP client for the file-serving host tests
        ],
    },
    entry_points={
        'console_scripts': [
            'assetfs=assetfs.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
