from setuptools import setup, find_packages

setup(
    name="chisquare-goodness-of-fit",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "scipy>=1.7.0",
        ],
    },
)
