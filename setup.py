import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dupescan",
    version="1.0",
    author="George Flanagin",
    author_email="me+undeux@georgeflanagin.com",
    description="Report files in a directory tree that have the same contents.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/georgeflanagin/undeux",
    py_modules=[
        "confirm",
        "dupehelp",
        "dupescan",
        "fingerprint",
        "fpindex",
        "report",
        "scanconfig",
        "traversal",
        ],
    python_requires=">=3.9",
    install_requires=[
        "crcmod",
        "xxhash",
        ],
    extras_require={
        "test": ["pytest"],
        },
    entry_points={
        "console_scripts": ["dupescan=dupescan:main"],
        },
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities"
    ],
)
