import setuptools

setuptools.setup(
    name="partsec",
    version="0.1.0",
    license="MIT License",
    description="Backtracking parser combinators with two-tier errors",
    package_dir={"": "src"},
    packages=setuptools.find_namespace_packages(
        where="src", include=["partsec", "partsec.*"]
    ),
    python_requires=">=3.7",
    install_requires=["typing_extensions>=4.0"],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
