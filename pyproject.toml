[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polarchess"
version = "0.1.0"
description = "Chess engine building blocks: bitboards, attack tables, move encoding, history tables, search limiters and material values"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic bitboards", "pext", "move encoding", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polarchess"]

[tool.pytest.ini_options]
addopts = "-ra"
