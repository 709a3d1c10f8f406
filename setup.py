import os
from setuptools import setup, find_packages

# version lives in the package itself
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'fcg', '__init__.py')) as f:
    version = [l.split("'")[1] for l in f if l.startswith('fcg_version')][0]

setup(
    name='fcg',
    version=version,
    description='Finishing chloroplast genomes from annotated assembly graphs',
    license='GPL 3.0',
    packages=find_packages(),
    package_data={'fcg': ['data/*']},
    python_requires='>=3.8',
    install_requires=[
        'networkx',
        'colored',
        'rich-argparse',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'fcg-finish-chloroplast=fcg.cli.finish_chloroplast:main',
        ],
    },
)
