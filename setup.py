import configparser
from pathlib import Path

from setuptools import find_packages, setup

import instancemeta

PIPFILE_FILEPATH = Path(__file__).resolve().parent / "Pipfile"


def get_package_dependencies_from_pipfile(section: str = "packages"):
    assert PIPFILE_FILEPATH.exists()
    config = configparser.ConfigParser()
    config.read(str(PIPFILE_FILEPATH))

    def clean_quotes(value):
        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        return value

    deps = []
    for package_set in zip(config[section], config[section].values()):
        required_package, required_version = package_set
        required_package = clean_quotes(required_package)
        required_version = clean_quotes(required_version)
        if required_version != "*":
            required_package = f"{required_package}{required_version}"
        deps.append(required_package)
    return deps


setup(
    name="instancemeta",
    version=instancemeta.__version__,
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    data_files=[("", ["README.md"]), ("", ["Pipfile"])],
    url="",
    license="BSD-2-Clause",
    author="KICONIA WORKS",
    author_email="developers@kiconiaworks.com",
    description="instancemeta exposes EC2 host metadata to server-rendered pages",
    install_requires=get_package_dependencies_from_pipfile("packages"),
    extras_require={"test": get_package_dependencies_from_pipfile("dev-packages")},
)
