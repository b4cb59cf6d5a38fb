from setuptools import setup

setup(
    name='seaport-approvals',
    version='0.1.0',
    description='Resolve and remediate token approvals for exchange operators',
    author='Ziver-opensource',
    package_dir={'': 'src'},
    packages=['seaport_approvals', 'seaport_approvals.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'web3>=7.0',
        'eth-account>=0.13',
        'aiohttp>=3.8',
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-asyncio>=0.21',
        ],
    },
    entry_points={
        'console_scripts': [
            'seaport-approvals = seaport_approvals.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
