# coding=utf-8
"""Setup package 'gmath'."""

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

setup(
    name="gmath",
    version="0.1.0",
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    description="Exact rational and IEEE-aware complex number arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['gmath'],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest", "hypothesis"],
        },
    license='BSD',
    keywords='rational complex number datatype',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
