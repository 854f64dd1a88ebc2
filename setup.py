from configparser import ConfigParser

from setuptools import setup


with open("README.md", "r") as fd:
    long_description = fd.read()


def get_dependencies(section: str = "packages"):
    pipfile = ConfigParser()
    assert pipfile.read("Pipfile"), "Could not read Pipfile"
    return list(pipfile[section])


setup(
    name="robustshamir",
    version="2026.10.17",
    author="Dorian Jaminais",
    author_email="sharedvault@jaminais.fr",
    description="Recover a Shamir shared secret even when some of the shares "
    "are corrupted, and tell which ones.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/nanassito/robustshamir",
    packages=["robustshamir"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: Public Domain",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=get_dependencies(),
    extras_require={"test": get_dependencies("dev-packages")},
    entry_points={"console_scripts": ["robustshamir=robustshamir.cli:main"]},
)
