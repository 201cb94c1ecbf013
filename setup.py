from setuptools import setup, find_packages

setup(
    name='parity-dir',
    version='0.1.0',
    author='Parity Technologies',
    description='Platform-specific data, cache and keystore directories for the Parity Ethereum client.',
    packages=find_packages(include=['parity_dir', 'parity_dir.*']),
    include_package_data=True,
    install_requires=[
        'platformdirs',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
