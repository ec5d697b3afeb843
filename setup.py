# setup.py
from setuptools import setup, find_packages

setup(
    name="link_checker",
    version="0.1.0",
    description="Многопоточная проверка битых ссылок сайта LinkChecker",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"link_checker": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "link-checker=link_checker.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
