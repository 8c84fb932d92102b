from setuptools import setup, find_packages

setup(
    name="quickxorhash",
    version="0.1.0",
    description="QuickXorHash, the 160-bit OneDrive / SharePoint content checksum, with a hashlib-style streaming API, file and CLI helpers, and optional columnar hashing.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["quickxorhash=quickxorhash.__main__:main"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
