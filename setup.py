from setuptools import setup, find_packages

setup(
    name="oppiabot",
    version="0.1.0",
    description="Oppia GitHub Bot for pull request template checks",
    author="Oppia",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyGithub>=2.8.1",
        "python-dotenv>=1.2.1",
        "requests>=2.32.5",
        "cryptography>=46.0.0",  # Required for GitHub App signing if not using built-in
        "Flask>=3.0.0",
    ],
    entry_points={
        "console_scripts": [
            "oppiabot=oppiabot.cli:main",
            "oppiabot-server=oppiabot.server:main",
        ],
    },
    extras_require={
        "dev": ["pytest>=8.0.0"],
    },
    python_requires=">=3.11",
)
