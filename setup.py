from setuptools import setup, find_packages

setup(
    name="pybuildj",
    description="A Build system for the Java language",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Loris Kriyonas",
    author_email="loris.kriyonas@gmail.com",
    keywords=["java", "build"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "toml",
        "returns",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pybuildj = pybuildj.main:main",
        ]
    },
    setup_requires=[
        "setuptools>=42",
        "setuptools_scm>=3.5",
    ],
    use_scm_version={
        "write_to": "pybuildj/__version__.py",
        "fallback_version": "0.1.0",
    },
)
