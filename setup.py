from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ridematch",
    version="0.3.0",
    description="Optimal driver/passenger matching and spanning-backbone analysis.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    package_data={"ridematch.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["numpy", "PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest", "networkx"]},
    entry_points={"console_scripts": ["ridematch=ridematch.cli:main"]},
)
