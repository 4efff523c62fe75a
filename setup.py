from setuptools import setup, find_packages

setup(
    name="culprit",
    version="0.1.0",
    description="Binary search for the point where a script's status flips from GOOD to BAD",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Debuggers",
        "Topic :: Software Development :: Testing",
    ],
    keywords="bisect binary-search regression culprit debugging testing",

    packages=find_packages(where="src"),
    package_dir={"": "src"},

    python_requires=">=3.8",

    install_requires=[
        "tqdm>=4.64.0",
    ],

    extras_require={
        "dev": ["pytest>=7.0.0", "black>=23.0.0"],
    },

    entry_points={
        'console_scripts': [
            'culprit=culprit.cli.cli:main',
        ],
    },
)
