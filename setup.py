from pathlib import Path

from setuptools import find_packages, setup


def parse_requirements(filename):
    """Load requirements from a pip requirements file."""
    with (Path(__file__).parent / filename).open('r', encoding='utf-8') as file:
        lines = file.read().splitlines()
    return [line for line in lines if line and not line.startswith("#")]


setup(
    name="pybalancedtree",
    version="0.1.0",
    description="A self-balancing (AVL) binary search tree over unique ordered keys.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["balancedtree", "balancedtree.*"]),
    install_requires=parse_requirements("requirements.txt"),  # Dynamically read dependencies
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "balancedtree-demo=balancedtree.demo:main",
            "balancedtree-benchmark=balancedtree.benchmark:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    license="Apache 2.0"
)
