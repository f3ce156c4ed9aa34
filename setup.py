from setuptools import find_packages, setup


setup(
    name="localeguard",
    version="0.1.0",
    description="Locale file consistency checks and translation key generation",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "localeguard=localeguard.cli:main",
        ]
    },
)
