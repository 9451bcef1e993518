from setuptools import setup, find_packages

setup(
    name="extdust",
    version="1.0.0",
    packages=find_packages(include=["extdust", "extdust.*"]),
    description="Disk usage per file extension, powered by fd.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="Max Carlson",
    author_email="carlsonamax@gmail.com",
    url="https://github.com/MaxCarlson/extdust",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "extdust=extdust.cli:run",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
