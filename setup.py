from setuptools import setup, find_packages

setup(
    name="newsdigest",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"newsdigest": ["config.yaml"]},
    install_requires=[
        "requests",
        "scrapy",
        "beautifulsoup4>=4.9.1",
        "markdownify",
        "pydantic>=2",
        "python-dateutil",
        "pyyaml",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "newsdigest=newsdigest.cli:main",
        ],
    },
    python_requires=">=3.9",
)
