from setuptools import setup, find_packages

# Read the contents of README.md for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

requirements = [
    "click>=8.1.7",
    "pathspec>=0.12",
    "pydantic>=2.0",
    "PyYAML>=6.0",
    "rich>=13.8.1",
]

test_requirements = [
    "pytest>=8.3.2",
    "python-dotenv>=1.0",
]

setup(
    name="llmarkup",
    version="0.1.0",
    description="Extract tags, sections and file manifests from LLM code-generation output",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["llmarkup", "llmarkup.*"]),
    install_requires=requirements,
    extras_require={"test": test_requirements},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: Software Development :: Code Generators",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "llmarkup=llmarkup.cli:cli",
        ],
    },
    include_package_data=True,
    keywords=[
        "llm",
        "code generation",
        "markup parser",
        "CLI",
    ],
    license="MIT",
)
