from setuptools import find_packages, setup

setup(
    name='assocarray',
    version='0.1',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.9',
    license='MIT License',
    description='A linear-scan associative array backed by a doubling array',
    install_requires=[
        'attrs>=22.2.0',
        'typing-extensions>=4.7.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
)
