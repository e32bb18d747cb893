
from setuptools import setup, find_packages

setup(
    name="binfloat",
    version="0.1.0",
    description="Decode 32-bit IEEE 754 binary strings into decimal values",
    author="binfloat Project",
    packages=find_packages(exclude=["tests", "tests.*"]),  # This will find 'binfloat' and 'binfloat.encoding'
    install_requires=[
        "torch>=2.0.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "binfloat=binfloat.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
