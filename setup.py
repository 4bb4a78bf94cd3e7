from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

install_requires = [
    "pydantic >= 2.6, < 3",
    "typing_extensions >= 4.0, < 5",
    "click >= 8, < 9",
    "rich-click >= 1.6.0, < 2",
    "rich >= 10.16",
]

extras_require = dict(
    tests=[
        "pytest >= 7, < 9",
    ],
    dev=[
        "black",
        "isort >= 5.10.0, < 6",
    ],
)

setup(
    name="lsproto",
    description="Typed Language Server Protocol structures with a strict JSON wire codec.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    version="0.1.0",
    packages=find_packages(exclude=("tests",)),
    keywords=[
        "lsp",
        "language server protocol",
        "json-rpc",
        "pydantic",
    ],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require=extras_require,
    license="ISC",
    entry_points=dict(
        console_scripts=[
            "lsproto=lsproto.cli.__main__:main",
        ]
    ),
)
