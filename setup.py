# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mdsummary",
    version="0.1.0",
    description="Genera un SUMMARY navegable a partir de un árbol de documentos markdown",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mdsummary*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mdsummary=mdsummary.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
