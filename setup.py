import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="studykit",
    version="0.0.1",
    description="Leitner flashcard scheduler and turtle geometry exercises",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["studykit", "studykit.*"]),
    install_requires=[
        "numpy",
        "pydantic>=2",
        "python-dotenv",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
