[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinygpt"
version = "0.1.0"
description = "A small, dependency-free transformer forward pass: tokenizer, embeddings, multi-head attention and feed-forward blocks."
requires-python = ">=3.10"
dependencies = []
keywords = ["transformer", "gpt", "attention", "neural-network", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinygpt = "tinygpt.model:main"

[tool.hatch.build.targets.wheel]
packages = ["tinygpt"]

[tool.pytest.ini_options]
addopts = "-ra"
