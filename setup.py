import setuptools

with open("README.md", "r") as f:
    long_description = f.read()

setuptools.setup(
    name="lptools",
    version="0.1.0",
    author="",
    author_email="",
    description="A software package for bounded lattice polytopes given by half-spaces.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    license="GNU General Public License (GPL)",
    python_requires='>=3.8',
    install_requires=["numpy", "python-flint", "tqdm"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License (GPL)",
        "Operating System :: OS Independent",
    ]
)
