"""Setup configuration for doc-chunker."""

from setuptools import setup, find_packages

setup(
    name='doc-chunker',
    version='1.0.0',
    description='Document chunking engine with recursive separator fallback and overlap',
    author='Your Name',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.11',
    install_requires=[
        'python-dotenv==1.0.0',
        'PyYAML>=6.0.1',
    ],
    extras_require={
        'test': [
            'pytest>=7.4',
        ],
    },
)
