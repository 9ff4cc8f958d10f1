from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="countryidentity",
    version="0.1.0",
    author="Peter Cotton",
    author_email="",
    description="ISO 3166-1 country lookup, aliases and localized names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'countryidentity': ['countries/data/*.csv', 'countries/data/*.parquet'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.3.0",
        "pyarrow>=10.0.0",
        "pycountry>=22.1.10",
        "Babel>=2.9.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
