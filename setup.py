from setuptools import find_packages, setup

NAME = "epp2json"
VERSION = "1.0.0"
DESCRIPTION = "Konwerter plików EPP (EDI++) z fakturami do formatu JSON."

INSTALL_REQUIRES = [
    "openpyxl>=3.1",
]

EXTRAS_REQUIRE = {
    "test": ["pytest>=7,<9.1"],
}

setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "epp2json = epp2json.cli:main",
        ],
    },
)
