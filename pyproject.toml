[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voipmedia"
version = "0.1.0"
description = "RTP media sessions, SDP parsing and formatting, G.711 mu-law and comfort noise for VoIP"
requires-python = ">=3.10"
dependencies = []
keywords = ["voip", "rtp", "sdp", "g711", "dtmf", "telephony"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Internet Phone",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voipmedia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
