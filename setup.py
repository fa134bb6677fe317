from setuptools import setup

setup(
    name='monkey-runtime',
    version='0.1.0',
    description='Tree-walking evaluator, object system and builtins for the Monkey language',
    author='Monkey runtime contributors',
    package_dir={'': 'src'},
    packages=['monkey', 'monkey.evaluator', 'monkey.cli'],
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'monkey = monkey.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
