import os
from setuptools import setup, find_packages


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


setup(
    name='simplegraphite',
    version='0.1',
    author='Helmut Zechmann',
    description=("Simple client for writing one shot metrics to graphite"),
    license='Apache License (2.0)',
    keywords='metrics graphite carbon',
    packages=find_packages(exclude=['tests']),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
    ],
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    install_requires=[],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
    zip_safe=False
)
