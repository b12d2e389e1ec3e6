from setuptools import setup, find_packages

setup(
    name="stocksim",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run_simulation"],
    install_requires=[
        "pandas>=2.3.1",
        "numpy>=2.0.2",
        "pyyaml>=6.0",
        "tqdm>=4.67.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    description="Discrete-event simulation of a single inventory under stochastic demand",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Information Analysis",
    ],
    entry_points={
        'console_scripts': [
            'run-simulation=run_simulation:main',
        ],
    },
    include_package_data=True,
    package_data={
        'stocksim': [
            'config/*.yaml',
        ],
    },
)
