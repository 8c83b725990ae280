import setuptools

setuptools.setup(
    name="rgbtry",
    version="0.1.0",
    description="Range-checked conversion of integer triples into 8-bit RGB colors.",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rgbtry-demo=rgbtry.__main__:main",
        ],
    },
)
