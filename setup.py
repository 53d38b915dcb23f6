from setuptools import setup

setup(
    name="wikirelay",
    packages=["wikirelay"],  # this must be the same as the name above
    version="0.1.0",
    description="A small relay that searches the Wikipedia API and normalizes its responses.",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords=["wikipedia", "mediawiki", "search", "api", "relay"],
    classifiers=[],
    license="MIT",
    entry_points={"console_scripts": ["wikirelay=wikirelay.cli:main"]},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "fire>=0.3.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "orjson>=3.9.0",
        "rich>=13.4.1",
    ],
    extras_require={"test": ["pytest>=7.0", "pytest-asyncio>=0.21"]},
)
