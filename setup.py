from setuptools import setup, find_packages

setup(
    name="seo_content_analyzer",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    package_data={"content_analyzer": ["templates/*.html"]},
    include_package_data=True,
    install_requires=[
        "fastapi",
        "uvicorn",
        "python-dotenv",
        "httpx",
        "pydantic>=2",
        "jinja2",
        "python-multipart"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio"
        ]
    }
)
