# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cheattable2csv",
    version="1.0.0",
    description="Flatten Cheat Engine tables (.CT) into CSV exports",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cheattable2csv", "cheattable2csv.*"]),
    python_requires=">=3.8",
    install_requires=[
        "defusedxml",  # Safe parsing of shared cheat tables
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'cheattable2csv=cheattable2csv.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
