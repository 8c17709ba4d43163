"""
    setup.py

    Package requirements are listed in `requirements.txt`.
"""

from pathlib import Path
import setuptools

lib_dir = Path(__file__).resolve().parent

# Package requirements: Parse from `requirements.txt`.
requirementPath = lib_dir / 'requirements.txt'
requirements = []
if Path(requirementPath).is_file():
    with open(requirementPath, "r") as f:
        requirements = f.read().splitlines()

setuptools.setup(
    name="nucleobases",
    version="0.0.1",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=setuptools.find_packages(include=["nucleobases", "nucleobases.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"]
    },
    python_requires='>=3.8',
)
