from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="genomepack",
    version="1.0.0",
    author="genomepack developers",
    description="Packages reference genomes, their FASTA index and annotation files into .genome archives.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=['pysam'],
    extras_require={'test': ['pytest']},
    packages=['genomepack', 'genomepack.core'],
    entry_points={'console_scripts': ['genomepack = genomepack.__main__:main']},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    keywords='genome archive fasta index cytoband bioinformatics',
    python_requires='>=3.6',
)
