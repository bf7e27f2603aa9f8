from typing import List, Optional, Sequence

from pip._internal.metadata import get_default_environment
from setuptools import find_packages, setup

# ----------------------------- check triton -----------------------------
# NOTE: triton can be installed as `triton`, `triton-nightly` or as the
# `pytorch-triton` build that torch pins. The import name is the same for all
# of them, so look the distribution up and depend on whichever is present.
# Upgrading a pytorch-triton that torch depends on may break torch.


class PackageConflictError(Exception):
    """Exception that there are conflicts in installed packages."""

    def __init__(self, message):
        super().__init__(message)

    def __str__(self):
        return self.args[0]


def detect_installed_package_from_group(
    conflicting_package_names: Sequence[str],
) -> Optional[str]:
    """Detect the installed packages in a group of mutually conflicting packages."""
    names = set(conflicting_package_names)
    if len(names) < len(conflicting_package_names):
        raise ValueError(
            f"There are duplicated package names in conflicting_package_names: {conflicting_package_names}"
        )

    environment = get_default_environment()
    installed_packages: List[str] = [
        item.canonical_name for item in environment.iter_installed_distributions()
    ]

    installed: List[str] = [name for name in names if name in installed_packages]
    if len(installed) > 1:
        raise PackageConflictError(
            f"There are more than 1 packages ({installed}) installed in the mutually "
            f"exclusive group {conflicting_package_names}. Consider fix this before going on."
        )
    if not installed:
        return None
    return installed[0]


triton_package_name = (
    detect_installed_package_from_group(("triton", "triton-nightly", "pytorch-triton"))
    or "triton"
)

# ----------------------------- Setup -----------------------------
setup(
    name="fast_rsqrt",
    version="0.1",
    description="Fast approximate reciprocal square root for float32 scalars and tensors.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8.0",
    license="Apache Software License",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
    ],
    install_requires=[
        f"{triton_package_name}>=2.2.0",
        "torch>=2.2.0",
        "numpy>=1.26",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest>=7.1.0",
        ],
    },
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={
        "fast_rsqrt.runtime": ["*.yaml"],
    },
    setup_requires=["setuptools"],
)
