import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="ethereum-legacy-signer",
    version="0.1.0",
    description="Sign and verify legacy and EIP-155 Ethereum transactions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="CC0-1.0",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=[
        "coincurve>=20,<22",
        "pycryptodome>=3.20,<4",
        "ethereum-rlp>=0.1.1,<0.2",
        "ethereum-types>=0.2.1,<0.3",
        "pydantic>=2,<3",
        "PyYAML>=6,<7",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-cov>=4.1.0,<5",
        ],
    },
)
