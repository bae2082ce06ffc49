from setuptools import setup, find_packages

setup(
    name='gametree',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'typer>=0.12',
        'rich>=13.0',
        'loguru>=0.7',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.4',
            'hypothesis>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'gametree=gametree.cli:app',
        ],
    },
    author='Stefan Filges',
    author_email='stefan.filges@pm.me',
    description='Alpha-beta minimax over user-built game trees, plus breadth-first graph traversal',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
