import pathlib
import sys

from setuptools import find_packages, setup


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"

# Check Python version, no point installing if unsupported version inplace
min_version = (3, 10)
if sys.version_info < min_version:
    py_version = ".".join(str(n) for n in sys.version_info)
    msg = (
        f"Python-{'.'.join(map(str, min_version))} or greater is required, "
        f"Python-{py_version} used."
    )
    raise RuntimeError(msg)


short_description = "Equal probability discrete gamma and beta rate categories"

readme_path = pathlib.Path(__file__).parent / "README.md"

long_description = readme_path.read_text()


PACKAGE_DIR = "src"

setup(
    name="discrete-rates",
    version=__version__,
    description=short_description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["any"],
    license=__license__,
    keywords=[
        "statistics",
        "phylogeny",
        "evolution",
        "rate heterogeneity",
        "gamma distribution",
        "beta distribution",
    ],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    packages=find_packages(where="src"),
    package_dir={"": PACKAGE_DIR},
    python_requires=">=3.10",
    install_requires=[
        "click",
        "numba>0.53",
        "numpy",
        "scitrack",
    ],
    extras_require={
        "test": [
            "nox",
            "pytest-cov",
            "pytest>=4.3.0",
        ],
        "dev": [
            "black",
            "isort",
            "nox",
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": ["discrete-rates=discrete_rates.cli:main"],
    },
)
