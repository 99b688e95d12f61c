from pathlib import Path

from setuptools import find_packages, setup

NAME = "facturacsv"
DESCRIPTION = "Validación y filtrado de exportaciones CSV de facturas."

README = Path("README.md")
LONG_DESCRIPTION = README.read_text(encoding="utf-8") if README.exists() else DESCRIPTION

setup(
    name=NAME,
    version="0.1.0",
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["openpyxl"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["facturacsv=facturacsv.cli:main"]},
)
