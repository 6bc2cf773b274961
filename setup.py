from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="basket-tasks",
    version="0.1.0",
    author="Your Name",
    description="Command-line tasks for a Terra liquidity basket contract",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/basket-tasks",
    packages=find_packages(exclude=["tests", "tasks", "results", "venv"]),
    python_requires=">=3.8",
    install_requires=[
        "terra-sdk>=2.0.0",
        "python-dotenv>=1.0.0",
        "mnemonic>=0.19",
        "requests>=2.25.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "basket-tasks=basket_tasks.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
