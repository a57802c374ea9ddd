#! /usr/bin/env python


import os

from setuptools import find_packages, setup


RESOURCE = os.path.join("res", "morsetree")


def read(fpath):
    with open(os.path.join(os.path.dirname(__file__), fpath)) as stream:
        return stream.read()


def get_requirements(path="requirements.txt"):
    data = read(path)
    lines = []
    for line in data.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("-r"):
            new_path = line[2:].strip()
            lines.extend(get_requirements(path=new_path))
            continue
        lines.append(line)
    return lines


setup(
    name="morsetree",
    version="1.0.0",
    description="Encode and decode single letters using a morse tree table.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    license="Unlicense",
    packages=find_packages(exclude=["tests"]),
    scripts=[os.path.join("bin", "morsetree")],
    include_package_data=True,
    install_requires=get_requirements(),
    extras_require={
        "test": get_requirements(path="requirements-test.txt"),
    },
    python_requires=">=3.6",
    test_suite="tests",
    data_files=[
        (
            RESOURCE,
            [
                os.path.join(RESOURCE, name)
                for name in [
                    "basic.mor",
                ]
            ]
        ),
    ],
)
