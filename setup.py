import os
from setuptools import setup, find_packages


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name = "katadasar",
    version = "0.1.0",
    author = "Agapitus Keyka Vigiliant",
    author_email = "keka.vigi@gmail.com",
    description = ("Dictionary-validated stemmer for Indonesian words."),
    license = "MIT",
    keywords = "linguistic stemming indonesian language",
    url = "http://github.com/kekavigi/katadasar",
    package_dir = {"": "src"},
    packages = find_packages("src", exclude=["tests"]),
    python_requires = ">=3.9",
    extras_require = {"tests": ["pytest"]},
    long_description = read("README.md"),
    long_description_content_type = "text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
    ],
 )
