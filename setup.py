from setuptools import find_packages, setup

setup(
    name="global-translations",
    version="0.1.0",
    description="Process-wide registry of translation sources with ordered, thread-safe lookup",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "beautifulsoup4>=4.12.0",
    ],
    extras_require={
        "dev": ["pytest>=8.2.0"],
    },
)
