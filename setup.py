# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="wordtally",
    version="1.0.0",
    description="Word frequency counter that reports the most used words and the last sentence using the top one",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["wordtally", "wordtally.*"]),
    package_data={
        "wordtally.interface": ["locales/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'wordtally=wordtally.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
