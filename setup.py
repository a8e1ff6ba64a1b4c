from setuptools import setup, find_packages

setup(
    name="browser_assertions",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.11",
    install_requires=[
        "browser-use>=0.2,<0.6",
        "playwright",
        "python-dotenv"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-mock"
        ]
    },
)
