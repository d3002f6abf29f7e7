from setuptools import setup, find_packages

# Core dependencies
core_requirements = []

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0"
]

setup(
    name="text_contrast",
    version="0.1.0",
    description="Pick a readable black or white text color for any background color",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
