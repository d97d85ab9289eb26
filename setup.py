from setuptools import find_packages, setup


setup(
    name = 'expectations',
    version = '0.1.0',
    description = 'Fluent expectations that report failures without stopping tests',
    license = 'MIT',
    packages = find_packages(exclude=['tests*']),
    install_requires = [
        'startup',
    ],
)
