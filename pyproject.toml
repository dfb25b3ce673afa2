[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinicqueue"
version = "0.1.0"
description = "Clinic waiting-room ticketing: a kiosk that issues priority tickets and a display that calls patients in order."
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "clinic", "ticketing", "priority", "waiting room"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinicqueue-totem = "clinicqueue.totem:main"
clinicqueue-tv = "clinicqueue.tv:main"

[tool.hatch.build.targets.wheel]
packages = ["clinicqueue"]

[tool.pytest.ini_options]
addopts = "-ra"
