from setuptools import setup

setup(
    name='crc16-py',
    version='0.0.1',
    url='',
    license='AGPL-3.0-only',

    author='',
    author_email='',

    description='Table driven CRC-16 for the well-known CRC-16 algorithms',
    long_description='',

    packages=['crc16'],

    python_requires='>3.10',

    extras_require={
        'test': [
            'pytest>=7.2.0'
        ],
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    },

    entry_points={
        'console_scripts': [
            'crc16-py = crc16.__main__:main'
        ]
    }
)
